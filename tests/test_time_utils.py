"""Tests for timetable time formatting helpers."""

from datetime import date

import pytest

from formatting import (
    add_minutes_to_time,
    calculate_delay_minutes,
    calculate_stop_duration,
    calculate_travel_time,
    format_duration,
    format_time_with_delay,
    get_current_date,
    get_time_range_description,
    get_travel_time_in_hours,
    get_tomorrow_date,
    is_valid_date,
    is_valid_time,
    parse_relative_time,
)


@pytest.mark.parametrize(
    "dep, arr, expected",
    [
        ("08:00", "10:30", "2小時30分鐘"),
        ("08:00", "10:00", "2小時"),
        ("08:00", "08:45", "45分鐘"),
        ("23:30", "01:00", "1小時30分鐘"),
        ("bad", "10:00", "計算錯誤"),
    ],
)
def test_calculate_travel_time(dep, arr, expected) -> None:
    assert calculate_travel_time(dep, arr) == expected


def test_travel_time_in_hours() -> None:
    assert get_travel_time_in_hours("08:00", "09:30") == 1.5
    assert get_travel_time_in_hours("22:00", "02:00") == 4
    assert get_travel_time_in_hours("", "02:00") == 0


def test_stop_duration() -> None:
    assert calculate_stop_duration("10:00", "10:02") == "2分"
    assert calculate_stop_duration("x", "10:02") == "停車"


def test_add_minutes_wraps_midnight() -> None:
    assert add_minutes_to_time("23:50", 20) == "00:10"
    assert add_minutes_to_time("08:05", 5) == "08:10"
    assert add_minutes_to_time("oops", 5) == "oops"


def test_delay_formatting() -> None:
    assert calculate_delay_minutes("10:00", "10:07") == 7
    assert format_time_with_delay("10:00", "10:07") == "10:07 (+7分)"
    assert format_time_with_delay("10:00", "10:00") == "10:00"
    assert format_time_with_delay("10:00") == "10:00"
    assert format_time_with_delay(None, "10:07") == "---"
    assert format_time_with_delay("10:05", "10:00") == "10:00"


def test_format_duration() -> None:
    assert format_duration(0) == "0分鐘"
    assert format_duration(125) == "2小時5分鐘"


def test_current_and_tomorrow_dates_are_iso() -> None:
    assert is_valid_date(get_current_date())
    assert is_valid_date(get_tomorrow_date("UTC"))


@pytest.mark.parametrize("value, expected", [("07:30", True), ("24:00", False), ("7:3", False)])
def test_is_valid_time(value, expected) -> None:
    assert is_valid_time(value) is expected


@pytest.mark.parametrize("value, expected", [("2026-10-19", True), ("2026-02-29", False), ("2026-1-1", False)])
def test_is_valid_date(value, expected) -> None:
    assert is_valid_date(value) is expected


@pytest.mark.parametrize(
    "hour, expected",
    [(5, "早上"), (9, "上午"), (12, "中午"), (14, "下午"), (18, "晚上"), (22, "深夜"), (3, "深夜")],
)
def test_time_range_description(hour, expected) -> None:
    assert get_time_range_description(hour) == expected


def test_parse_relative_time() -> None:
    today = date(2026, 10, 19)
    assert parse_relative_time("明天早上台北到花蓮", today=today) == {
        "date": "2026-10-20",
        "time_hint": "06:00-09:00",
    }
    assert parse_relative_time("today afternoon", today=today) == {
        "date": "2026-10-19",
        "time_hint": "14:00-18:00",
    }
    assert parse_relative_time("noon train", today=today) == {"time_hint": "11:00-14:00"}
    assert parse_relative_time("台北到花蓮", today=today) == {}


def test_missing_times_fall_back_instead_of_raising() -> None:
    assert calculate_travel_time(None, "10:00") == "計算錯誤"
    assert get_travel_time_in_hours("08:00", None) == 0
    assert calculate_stop_duration(None, "10:02") == "停車"
    assert add_minutes_to_time(None, 5) is None
    assert calculate_delay_minutes("10:00", 1000) == 0
    assert is_valid_time(None) is False
    assert is_valid_date(20261019) is False
