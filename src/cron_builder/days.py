"""Day-of-week enumeration consumed by the expression builders."""

from __future__ import annotations

from enum import Enum


class DayOfWeek(Enum):
    """The seven weekdays, keyed by lowercase English name."""

    MONDAY = "monday"
    TUESDAY = "tuesday"
    WEDNESDAY = "wednesday"
    THURSDAY = "thursday"
    FRIDAY = "friday"
    SATURDAY = "saturday"
    SUNDAY = "sunday"

    @classmethod
    def from_name(cls, text: str) -> "DayOfWeek":
        """Look up a day by full name or three-letter prefix, ignoring case."""
        key = str(text).strip().lower()
        for day in cls:
            if key == day.value or (len(key) == 3 and day.value.startswith(key)):
                return day
        raise ValueError(f"Unknown day of week: {text!r}")
