"""Command-line interface for building cron expressions."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Tuple

from cron_builder.config import build_expression, load_schedules
from cron_builder.days import DayOfWeek
from cron_builder.exporter import export_crontab, export_schedules_to_csv, export_schedules_to_json
from cron_builder.expressions import (
    daily_at,
    every_x_hours,
    every_x_minutes,
    monthly_at,
    weekdays_at,
    weekends_at,
    weekly_at,
)

logger = logging.getLogger(__name__)

EXPORT_FORMATS = ("crontab", "csv", "json")


def _add_time_args(parser: argparse.ArgumentParser, hour_required: bool) -> None:
    if hour_required:
        parser.add_argument("--hour", type=int, required=True, help="Hour of the day (0-23).")
    else:
        parser.add_argument("--hour", type=int, default=0, help="Hour of the day (0-23).")
    parser.add_argument("--minute", type=int, default=0, help="Minute of the hour (0-59).")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Build five-field cron expressions.")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging.")
    sub = parser.add_subparsers(dest="command", required=True)

    minutes = sub.add_parser("minutes", help="Every N minutes.")
    minutes.add_argument("interval", type=int, help="Interval in minutes (1-59).")

    hours = sub.add_parser("hours", help="Every N hours.")
    hours.add_argument("interval", type=int, help="Interval in hours (1-23).")
    hours.add_argument("--minute", type=int, default=0, help="Minute past the hour (0-59).")

    _add_time_args(sub.add_parser("daily", help="Once a day."), hour_required=True)

    weekly = sub.add_parser("weekly", help="Once a week.")
    weekly.add_argument("day", help="Day of week, e.g. monday or MON.")
    _add_time_args(weekly, hour_required=False)

    monthly = sub.add_parser("monthly", help="Once a month.")
    monthly.add_argument("day_of_month", type=int, help="Day of the month (1-31).")
    _add_time_args(monthly, hour_required=False)

    _add_time_args(sub.add_parser("weekdays", help="Monday to Friday."), hour_required=True)
    _add_time_args(sub.add_parser("weekends", help="Saturday and Sunday."), hour_required=True)

    build = sub.add_parser("build", help="Build every schedule in a YAML file.")
    build.add_argument("--schedules", default="config/schedules.example.yml", help="Path to schedules YAML.")
    build.add_argument("--output-dir", default="sample_output", help="Directory for exported outputs.")
    build.add_argument(
        "--format",
        dest="formats",
        action="append",
        choices=EXPORT_FORMATS,
        help="Output format; repeat for several. Defaults to all.",
    )
    return parser


def _single_expression(args: argparse.Namespace) -> str:
    if args.command == "minutes":
        return every_x_minutes(args.interval)
    if args.command == "hours":
        return every_x_hours(args.interval, args.minute)
    if args.command == "daily":
        return daily_at(args.hour, args.minute)
    if args.command == "weekly":
        return weekly_at(DayOfWeek.from_name(args.day), args.hour, args.minute)
    if args.command == "monthly":
        return monthly_at(args.day_of_month, args.hour, args.minute)
    if args.command == "weekdays":
        return weekdays_at(args.hour, args.minute)
    return weekends_at(args.hour, args.minute)


def _run_build(args: argparse.Namespace) -> None:
    schedules = load_schedules(args.schedules)
    rows: List[Tuple[str, str, str | None]] = []
    for schedule in schedules:
        expression = build_expression(schedule)
        logger.debug("Built %s -> %s", schedule.id, expression)
        rows.append((schedule.id, expression, schedule.command))

    formats = args.formats or list(EXPORT_FORMATS)
    output_dir = Path(args.output_dir)
    if "crontab" in formats:
        entries = [(expression, command) for _, expression, command in rows if command]
        if len(entries) < len(rows):
            logger.info("Skipped %d schedules without a command in crontab output", len(rows) - len(entries))
        export_crontab(entries, output_dir / "crontab")
    if "csv" in formats:
        export_schedules_to_csv(rows, output_dir / "schedules.csv")
    if "json" in formats:
        export_schedules_to_json(rows, output_dir / "schedules.json")


def main(argv: List[str] | None = None) -> None:
    args = _build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    try:
        if args.command == "build":
            _run_build(args)
        else:
            print(_single_expression(args))
    except Exception as exc:  # noqa: BLE001
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
