"""Stateless time formatting helpers for timetable output."""

from .time_utils import (
    calculate_travel_time,
    get_travel_time_in_hours,
    calculate_stop_duration,
    add_minutes_to_time,
    format_time_with_delay,
    calculate_delay_minutes,
    get_current_date,
    get_tomorrow_date,
    is_valid_time,
    is_valid_date,
    get_time_range_description,
    format_duration,
    parse_relative_time,
)

__all__ = [
    'calculate_travel_time',
    'get_travel_time_in_hours',
    'calculate_stop_duration',
    'add_minutes_to_time',
    'format_time_with_delay',
    'calculate_delay_minutes',
    'get_current_date',
    'get_tomorrow_date',
    'is_valid_time',
    'is_valid_date',
    'get_time_range_description',
    'format_duration',
    'parse_relative_time',
]
