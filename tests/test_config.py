"""Tests for schedule configuration loading."""

from pathlib import Path

import pytest

from cron_builder.config import ConfigError, ScheduleConfig, build_expression, load_schedules
from cron_builder.days import DayOfWeek
from cron_builder.expressions import InvalidArgumentError


def _write(tmp_path: Path, content: str) -> str:
    file_path = tmp_path / "schedules.yml"
    file_path.write_text(content, encoding="utf-8")
    return str(file_path)


def test_load_schedules_parses_configs(tmp_path: Path) -> None:
    content = """\
schedules:
  - id: report
    kind: weekly
    day: mon
    hour: 8
    command: /bin/report
  - id: poll
    kind: every_x_minutes
    interval: 5
"""
    schedules = load_schedules(_write(tmp_path, content))

    assert schedules == [
        ScheduleConfig(id="report", kind="weekly", hour=8, day=DayOfWeek.MONDAY, command="/bin/report"),
        ScheduleConfig(id="poll", kind="every_x_minutes", interval=5),
    ]


def test_load_schedules_accepts_top_level_list(tmp_path: Path) -> None:
    content = """\
- id: nightly
  kind: daily
  hour: 2
  minute: 30
"""
    schedules = load_schedules(_write(tmp_path, content))

    assert [build_expression(s) for s in schedules] == ["30 2 * * *"]


def test_load_schedules_empty_file(tmp_path: Path) -> None:
    assert load_schedules(_write(tmp_path, "")) == []


def test_load_schedules_missing_required_fields(tmp_path: Path) -> None:
    content = """\
- kind: daily
  hour: 1
"""
    with pytest.raises(ConfigError):
        load_schedules(_write(tmp_path, content))


def test_load_schedules_missing_kind_specific_field(tmp_path: Path) -> None:
    content = """\
- id: monthly_without_day
  kind: monthly
"""
    with pytest.raises(ConfigError, match="day_of_month"):
        load_schedules(_write(tmp_path, content))


def test_load_schedules_unknown_kind(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="Unknown schedule kind"):
        load_schedules(_write(tmp_path, "- {id: x, kind: yearly}\n"))


def test_load_schedules_unknown_day(tmp_path: Path) -> None:
    with pytest.raises(ConfigError):
        load_schedules(_write(tmp_path, "- {id: x, kind: weekly, day: funday}\n"))


def test_load_schedules_non_integer_field(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="hour"):
        load_schedules(_write(tmp_path, "- {id: x, kind: daily, hour: nine}\n"))


def test_load_schedules_invalid_structure_raises(tmp_path: Path) -> None:
    with pytest.raises(ConfigError):
        load_schedules(_write(tmp_path, "just a string"))
    with pytest.raises(ConfigError):
        load_schedules(_write(tmp_path, "other: []\n"))


def test_load_schedules_missing_file(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="not found"):
        load_schedules(str(tmp_path / "missing.yml"))


def test_build_expression_for_every_kind() -> None:
    cases = [
        (ScheduleConfig(id="a", kind="every_x_minutes", interval=10), "*/10 * * * *"),
        (ScheduleConfig(id="b", kind="every_x_hours", interval=4, minute=5), "5 */4 * * *"),
        (ScheduleConfig(id="c", kind="daily", hour=9, minute=30), "30 9 * * *"),
        (ScheduleConfig(id="d", kind="weekly", day=DayOfWeek.FRIDAY, hour=17), "0 17 * * FRI"),
        (ScheduleConfig(id="e", kind="monthly", day_of_month=15), "0 0 15 * *"),
        (ScheduleConfig(id="f", kind="weekdays", hour=9), "0 9 * * MON-FRI"),
        (ScheduleConfig(id="g", kind="weekends", hour=10), "0 10 * * SAT,SUN"),
    ]
    for schedule, expected in cases:
        assert build_expression(schedule) == expected


def test_build_expression_propagates_range_errors() -> None:
    with pytest.raises(InvalidArgumentError):
        build_expression(ScheduleConfig(id="bad", kind="daily", hour=25))


def test_build_expression_unknown_kind() -> None:
    with pytest.raises(ConfigError):
        build_expression(ScheduleConfig(id="bad", kind="hourly"))


@pytest.mark.parametrize("kind", ["daily", "weekdays", "weekends"])
def test_load_schedules_requires_hour_for_time_of_day_kinds(tmp_path: Path, kind: str) -> None:
    with pytest.raises(ConfigError, match="hour"):
        load_schedules(_write(tmp_path, f"- {{id: x, kind: {kind}}}\n"))


def test_weekly_and_monthly_default_to_midnight(tmp_path: Path) -> None:
    content = """\
- {id: w, kind: weekly, day: sunday}
- {id: m, kind: monthly, day_of_month: 3}
"""
    schedules = load_schedules(_write(tmp_path, content))

    assert [build_expression(s) for s in schedules] == ["0 0 * * SUN", "0 0 3 * *"]


def test_load_schedules_reads_zero_padded_numbers_as_decimal(tmp_path: Path) -> None:
    content = """\
- id: padded
  kind: daily
  hour: 09
  minute: 010
"""
    schedules = load_schedules(_write(tmp_path, content))

    assert schedules[0].hour == 9
    assert schedules[0].minute == 10
    assert build_expression(schedules[0]) == "10 9 * * *"


def test_load_schedules_rejects_multiline_command(tmp_path: Path) -> None:
    content = """\
- id: split
  kind: daily
  hour: 1
  command: "/bin/first\\n/bin/second"
"""
    with pytest.raises(ConfigError, match="single line"):
        load_schedules(_write(tmp_path, content))
