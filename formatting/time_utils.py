"""
Time calculations and formatting for timetable output.

Works on plain "HH:mm" and "YYYY-MM-DD" strings. Nothing here raises on
malformed times: each helper returns a display fallback instead, since the
output goes straight into a user-facing message.
"""

import re
from datetime import date, datetime, timedelta
from typing import Dict

import pytz

# Raised by malformed or missing time strings
_BAD_TIME = (ValueError, AttributeError, TypeError)

DEFAULT_TIMEZONE = "Asia/Taipei"
MINUTES_PER_DAY = 24 * 60

_TIME = re.compile(r'([0-1]?[0-9]|2[0-3]):[0-5][0-9]')
_DATE = re.compile(r'[0-9]{4}-[0-9]{2}-[0-9]{2}')

# (keywords, hint); first match wins
_DATE_KEYWORDS = (
    (('明天', 'tomorrow'), 1),
    (('今天', 'today'), 0),
)
# afternoon before noon: "afternoon" contains "noon"
_TIME_HINTS = (
    (('早上', 'morning'), '06:00-09:00'),
    (('上午',), '09:00-12:00'),
    (('下午', 'afternoon'), '14:00-18:00'),
    (('中午', 'noon'), '11:00-14:00'),
    (('晚上', 'evening'), '18:00-22:00'),
    (('深夜', 'night'), '22:00-05:00'),
)


def _to_minutes(time_str: str) -> int:
    hours, minutes = time_str.split(':')
    return int(hours) * 60 + int(minutes)


def _journey_minutes(departure_time: str, arrival_time: str) -> int:
    total = _to_minutes(arrival_time) - _to_minutes(departure_time)
    # Overnight journeys
    if total < 0:
        total += MINUTES_PER_DAY
    return total


def format_duration(minutes: int) -> str:
    """Format minutes as e.g. 2小時15分鐘."""
    hours, mins = divmod(minutes, 60)
    if hours == 0:
        return f"{mins}分鐘"
    if mins == 0:
        return f"{hours}小時"
    return f"{hours}小時{mins}分鐘"


def calculate_travel_time(departure_time: str, arrival_time: str) -> str:
    try:
        return format_duration(_journey_minutes(departure_time, arrival_time))
    except _BAD_TIME:
        return '計算錯誤'


def get_travel_time_in_hours(departure_time: str, arrival_time: str) -> float:
    """Travel time in decimal hours, for sorting."""
    try:
        return _journey_minutes(departure_time, arrival_time) / 60
    except _BAD_TIME:
        return 0


def calculate_stop_duration(arrival_time: str, departure_time: str) -> str:
    """Dwell time at a station, e.g. 2分."""
    try:
        return f"{_to_minutes(departure_time) - _to_minutes(arrival_time)}分"
    except _BAD_TIME:
        return '停車'


def add_minutes_to_time(time_str: str, minutes: int) -> str:
    try:
        total = (_to_minutes(time_str) + minutes) % MINUTES_PER_DAY
    except _BAD_TIME:
        return time_str
    return f"{total // 60:02d}:{total % 60:02d}"


def calculate_delay_minutes(original_time: str, adjusted_time: str) -> int:
    try:
        return _to_minutes(adjusted_time) - _to_minutes(original_time)
    except _BAD_TIME:
        return 0


def format_time_with_delay(original_time: str = None, adjusted_time: str = None) -> str:
    """Show the adjusted time with a (+N分) suffix when the train runs late."""
    if not original_time:
        return '---'
    if not adjusted_time or adjusted_time == original_time:
        return original_time

    delay = calculate_delay_minutes(original_time, adjusted_time)
    delay_text = f" (+{delay}分)" if delay > 0 else ''
    return f"{adjusted_time}{delay_text}"


def get_current_date(tz: str = DEFAULT_TIMEZONE) -> str:
    return datetime.now(pytz.timezone(tz)).strftime('%Y-%m-%d')


def get_tomorrow_date(tz: str = DEFAULT_TIMEZONE) -> str:
    tomorrow = datetime.now(pytz.timezone(tz)) + timedelta(days=1)
    return tomorrow.strftime('%Y-%m-%d')


def is_valid_time(time_str: str) -> bool:
    if not isinstance(time_str, str):
        return False
    return _TIME.fullmatch(time_str) is not None


def is_valid_date(date_str: str) -> bool:
    if not isinstance(date_str, str) or not _DATE.fullmatch(date_str):
        return False
    try:
        datetime.strptime(date_str, '%Y-%m-%d')
    except ValueError:
        return False
    return True


def get_time_range_description(hour: int) -> str:
    if 5 <= hour < 9:
        return '早上'
    if 9 <= hour < 12:
        return '上午'
    if 12 <= hour < 14:
        return '中午'
    if 14 <= hour < 18:
        return '下午'
    if 18 <= hour < 22:
        return '晚上'
    return '深夜'


def parse_relative_time(query: str, today: date = None, tz: str = DEFAULT_TIMEZONE) -> Dict[str, str]:
    """
    Pick out keyword date and time-of-day hints from a query.

    Returns:
        Dict with optional 'date' (YYYY-MM-DD) and 'time_hint'
        ("HH:mm-HH:mm") keys. Only fixed keywords are recognized.
    """
    if today is None:
        today = datetime.now(pytz.timezone(tz)).date()

    result = {}
    for keywords, offset in _DATE_KEYWORDS:
        if any(k in query for k in keywords):
            result['date'] = (today + timedelta(days=offset)).isoformat()
            break

    for keywords, hint in _TIME_HINTS:
        if any(k in query for k in keywords):
            result['time_hint'] = hint
            break

    return result
