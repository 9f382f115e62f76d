"""Export utilities for built schedules."""

from __future__ import annotations

import csv
import json
import logging
from pathlib import Path
from typing import Iterable, Tuple

logger = logging.getLogger(__name__)


def _prepare_path(path: str | Path) -> Path:
    destination = Path(path)
    destination.parent.mkdir(parents=True, exist_ok=True)
    return destination


def crontab_line(expression: str, command: str) -> str:
    """Return a crontab entry running ``command`` on ``expression``.

    cron turns an unescaped ``%`` into a newline, so each one is escaped.
    """
    escaped = command.replace("%", "\\%")
    return f"{expression} {escaped}"


def export_crontab(rows: Iterable[Tuple[str, str]], path: str | Path) -> None:
    """Write one crontab line per ``(expression, command)`` pair."""
    destination = _prepare_path(path)
    with destination.open("w", encoding="utf-8") as handle:
        for expression, command in rows:
            handle.write(crontab_line(expression, command) + "\n")
    logger.info("Wrote crontab to %s", destination)


def export_schedules_to_csv(rows: Iterable[Tuple[str, str, str | None]], path: str | Path) -> None:
    """Export ``(id, expression, command)`` rows to a CSV file."""
    destination = _prepare_path(path)
    with destination.open("w", encoding="utf-8", newline="") as handle:
        writer = csv.writer(handle)
        writer.writerow(["id", "expression", "command"])
        for schedule_id, expression, command in rows:
            writer.writerow([schedule_id, expression, command or ""])
    logger.info("Wrote schedules CSV to %s", destination)


def export_schedules_to_json(rows: Iterable[Tuple[str, str, str | None]], path: str | Path) -> None:
    """Export ``(id, expression, command)`` rows to a JSON file."""
    destination = _prepare_path(path)
    data = [
        {"id": schedule_id, "expression": expression, "command": command}
        for schedule_id, expression, command in rows
    ]
    with destination.open("w", encoding="utf-8") as handle:
        json.dump(data, handle, ensure_ascii=False, indent=2)
    logger.info("Wrote schedules JSON to %s", destination)
