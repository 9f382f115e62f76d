"""Loading schedule definitions from YAML files."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Any, Callable, Dict, List

import yaml

from cron_builder.days import DayOfWeek
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


class ConfigError(ValueError):
    """Raised when schedule files are invalid or incomplete."""


@dataclass
class ScheduleConfig:
    """A single named schedule definition."""

    id: str
    kind: str
    interval: int | None = None
    hour: int = 0
    minute: int = 0
    day: DayOfWeek | None = None
    day_of_month: int | None = None
    command: str | None = None


_BUILDERS: Dict[str, Callable[[ScheduleConfig], str]] = {
    "every_x_minutes": lambda s: every_x_minutes(s.interval),
    "every_x_hours": lambda s: every_x_hours(s.interval, s.minute),
    "daily": lambda s: daily_at(s.hour, s.minute),
    "weekly": lambda s: weekly_at(s.day, s.hour, s.minute),
    "monthly": lambda s: monthly_at(s.day_of_month, s.hour, s.minute),
    "weekdays": lambda s: weekdays_at(s.hour, s.minute),
    "weekends": lambda s: weekends_at(s.hour, s.minute),
}

_KIND_FIELDS: Dict[str, List[str]] = {
    "every_x_minutes": ["interval"],
    "every_x_hours": ["interval"],
    "daily": ["hour"],
    "weekly": ["day"],
    "monthly": ["day_of_month"],
    "weekdays": ["hour"],
    "weekends": ["hour"],
}

SCHEDULE_KINDS = tuple(_BUILDERS)

_INT_TAG = "tag:yaml.org,2002:int"


class _DecimalLoader(yaml.SafeLoader):
    """Safe loader that reads integers as base 10, so ``minute: 09`` is 9."""


def _construct_decimal_int(loader: yaml.SafeLoader, node: yaml.ScalarNode) -> int:
    value = loader.construct_scalar(node)
    try:
        return int(value, 10)
    except ValueError as exc:
        raise ConfigError(f"Invalid integer {value!r} at {node.start_mark}") from exc


_DecimalLoader.yaml_implicit_resolvers = {
    first: [(tag, regexp) for tag, regexp in resolvers if tag != _INT_TAG]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}
_DecimalLoader.add_implicit_resolver(_INT_TAG, re.compile(r"^[-+]?[0-9]+$"), list("-+0123456789"))
_DecimalLoader.add_constructor(_INT_TAG, _construct_decimal_int)


def _require_fields(data: Dict[str, Any], required: List[str], context: str) -> None:
    missing = [field for field in required if field not in data or data[field] in (None, "")]
    if missing:
        raise ConfigError(f"Missing required fields {missing} in {context}")


def _as_int(data: Dict[str, Any], key: str, context: str, default: int | None = None) -> int | None:
    value = data.get(key, default)
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigError(f"Field {key!r} in {context} must be an integer, got {value!r}")
    return value


def _parse_entry(item: Dict[str, Any], context: str) -> ScheduleConfig:
    _require_fields(item, ["id", "kind"], context)
    kind = str(item["kind"])
    if kind not in _BUILDERS:
        raise ConfigError(f"Unknown schedule kind {kind!r} in {context}; expected one of {list(SCHEDULE_KINDS)}")
    _require_fields(item, _KIND_FIELDS.get(kind, []), context)

    day: DayOfWeek | None = None
    if item.get("day") not in (None, ""):
        try:
            day = DayOfWeek.from_name(item["day"])
        except ValueError as exc:
            raise ConfigError(f"{exc} in {context}") from exc

    command = item.get("command")
    if isinstance(command, str) and ("\n" in command or "\r" in command):
        raise ConfigError(f"Field 'command' in {context} must be a single line")
    return ScheduleConfig(
        id=str(item["id"]),
        kind=kind,
        interval=_as_int(item, "interval", context),
        hour=_as_int(item, "hour", context, 0),
        minute=_as_int(item, "minute", context, 0),
        day=day,
        day_of_month=_as_int(item, "day_of_month", context),
        command=str(command) if command not in (None, "") else None,
    )


def load_schedules(path: str) -> List[ScheduleConfig]:
    """Load schedule definitions from a YAML file."""
    raw = yaml.load(_read_file(path), Loader=_DecimalLoader)
    if raw is None:
        return []

    if isinstance(raw, dict):
        if "schedules" not in raw:
            raise ConfigError('Expected a "schedules" list in the YAML content.')
        raw_schedules = raw["schedules"] or []
    elif isinstance(raw, list):
        raw_schedules = raw
    else:
        raise ConfigError("Schedules YAML must be a list or contain a top-level 'schedules' key.")

    if not isinstance(raw_schedules, list):
        raise ConfigError("schedules must be a list.")

    schedules: List[ScheduleConfig] = []
    for idx, item in enumerate(raw_schedules):
        if not isinstance(item, dict):
            raise ConfigError(f"Schedule entry at index {idx} must be a mapping.")
        schedules.append(_parse_entry(item, f"schedule {idx}"))
    logger.debug("Loaded %d schedules from %s", len(schedules), path)
    return schedules


def build_expression(schedule: ScheduleConfig) -> str:
    """Build the cron expression described by ``schedule``."""
    try:
        builder = _BUILDERS[schedule.kind]
    except KeyError as exc:
        raise ConfigError(f"Unknown schedule kind {schedule.kind!r}") from exc
    return builder(schedule)


def _read_file(path: str) -> str:
    try:
        with open(path, "r", encoding="utf-8") as handle:
            return handle.read()
    except FileNotFoundError as exc:
        raise ConfigError(f"Configuration file not found: {path}") from exc
