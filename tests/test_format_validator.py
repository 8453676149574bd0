"""Tests for train number, station name, date and time format checks."""

from datetime import date

import pytest

from validation import (
    extract_numbers,
    is_clean_query,
    update_config,
    validate_date_format,
    validate_station_name,
    validate_time_format,
    validate_train_number,
)

TODAY = date(2026, 10, 19)


@pytest.mark.parametrize("value", ["1", "152", "1234", "152A", " 152a "])
def test_valid_train_numbers(value) -> None:
    assert validate_train_number(value)


@pytest.mark.parametrize("value", ["", "12345", "A152", "152AB", "15-2", "１５２"])
def test_invalid_train_numbers(value) -> None:
    assert not validate_train_number(value)


@pytest.mark.parametrize("value", ["台北", "花蓮", "Taipei", "板橋 (新北)", "台北（北車）", "Taipei-Main"])
def test_valid_station_names(value) -> None:
    assert validate_station_name(value)


@pytest.mark.parametrize("value", ["", "   ", "台北;DROP", "<b>", "station!"])
def test_invalid_station_names(value) -> None:
    assert not validate_station_name(value)


def test_date_within_a_year_is_valid() -> None:
    assert validate_date_format("2026-10-19", today=TODAY)
    assert validate_date_format("2027-10-19", today=TODAY)
    assert validate_date_format("2025-10-19", today=TODAY)


def test_date_beyond_a_year_is_invalid() -> None:
    assert not validate_date_format("2027-10-20", today=TODAY)
    assert not validate_date_format("2025-10-18", today=TODAY)


@pytest.mark.parametrize("value", ["2026-02-30", "2026-13-01", "2026/10/19", "26-10-19", "2026-10-19\n"])
def test_malformed_dates_are_invalid(value) -> None:
    assert not validate_date_format(value, today=TODAY)


def test_date_defaults_to_today_in_configured_timezone() -> None:
    update_config(timezone="UTC")
    assert not validate_date_format("1999-01-01")


@pytest.mark.parametrize("value", ["00:00", "9:05", "09:05", "23:59"])
def test_valid_times(value) -> None:
    assert validate_time_format(value)


@pytest.mark.parametrize("value", ["24:00", "12:60", "1205", "12:5", "12:05 "])
def test_invalid_times(value) -> None:
    assert not validate_time_format(value)


def test_is_clean_query() -> None:
    assert is_clean_query("台北到花蓮，明天早上？")
    assert not is_clean_query("<script>")


def test_extract_numbers() -> None:
    assert extract_numbers("車次 152 和 1234A") == [152, 1234]
    assert extract_numbers("沒有數字") == []
