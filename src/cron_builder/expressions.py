"""Builders for five-field cron expressions.

Every builder validates its numeric inputs first and then hands the derived
fields to :func:`format_expression`, so no partially built string is ever
returned.
"""

from __future__ import annotations

from typing import Dict

from cron_builder.days import DayOfWeek


class InvalidArgumentError(ValueError):
    """Raised when a builder input is outside its allowed range."""

    def __init__(self, name: str, value: object, message: str | None = None) -> None:
        self.name = name
        self.value = value
        self.message = message or "Argument out of range"
        super().__init__(f"{self.message}: {name}={value!r}")


_DAY_CODES: Dict[DayOfWeek, str] = {
    DayOfWeek.MONDAY: "MON",
    DayOfWeek.TUESDAY: "TUE",
    DayOfWeek.WEDNESDAY: "WED",
    DayOfWeek.THURSDAY: "THU",
    DayOfWeek.FRIDAY: "FRI",
    DayOfWeek.SATURDAY: "SAT",
    DayOfWeek.SUNDAY: "SUN",
}


def _check_range(name: str, value: int, low: int, high: int) -> None:
    """Require ``value`` to be a plain int (not bool) within ``[low, high]``."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgumentError(name, value, "Expected an integer")
    if not low <= value <= high:
        raise InvalidArgumentError(name, value, f"Expected a value between {low} and {high}")


def _check_hour_minute(hour: int, minute: int) -> None:
    _check_range("hour", hour, 0, 23)
    _check_range("minute", minute, 0, 59)


def format_expression(minute: int | str, hour: int | str, dom: str, month: str, dow: str) -> str:
    """Join the five cron fields with single spaces. Performs no validation."""
    return f"{minute} {hour} {dom} {month} {dow}"


def day_abbreviation(day: DayOfWeek) -> str:
    """Return the three-letter uppercase code for ``day`` (e.g. ``MON``)."""
    if not isinstance(day, DayOfWeek):
        raise InvalidArgumentError("day", day, "Expected a DayOfWeek")
    return _DAY_CODES[day]


def every_x_minutes(interval: int) -> str:
    """Trigger every ``interval`` minutes (1-59)."""
    _check_range("interval", interval, 1, 59)
    return format_expression(f"*/{interval}", "*", "*", "*", "*")


def every_x_hours(interval: int, minute: int = 0) -> str:
    """Trigger every ``interval`` hours (1-23) at ``minute`` past the hour."""
    _check_range("interval", interval, 1, 23)
    _check_range("minute", minute, 0, 59)
    return format_expression(minute, f"*/{interval}", "*", "*", "*")


def daily_at(hour: int, minute: int = 0) -> str:
    """Trigger once a day at ``hour:minute``."""
    _check_hour_minute(hour, minute)
    return format_expression(minute, hour, "*", "*", "*")


def weekly_at(day: DayOfWeek, hour: int = 0, minute: int = 0) -> str:
    """Trigger once a week on ``day`` at ``hour:minute``."""
    _check_hour_minute(hour, minute)
    return format_expression(minute, hour, "*", "*", day_abbreviation(day))


def monthly_at(day_of_month: int, hour: int = 0, minute: int = 0) -> str:
    """Trigger once a month on ``day_of_month`` (1-31) at ``hour:minute``."""
    _check_range("day_of_month", day_of_month, 1, 31)
    _check_hour_minute(hour, minute)
    return format_expression(minute, hour, str(day_of_month), "*", "*")


def weekdays_at(hour: int, minute: int = 0) -> str:
    """Trigger Monday through Friday at ``hour:minute``."""
    _check_hour_minute(hour, minute)
    return format_expression(minute, hour, "*", "*", "MON-FRI")


def weekends_at(hour: int, minute: int = 0) -> str:
    """Trigger Saturday and Sunday at ``hour:minute``."""
    _check_hour_minute(hour, minute)
    return format_expression(minute, hour, "*", "*", "SAT,SUN")
