"""
Format checks for domain-specific strings in tool arguments.

All checks are predicates: they return False instead of raising, and the
caller decides how to word the rejection (see get_validation_error()).
"""

import re
from datetime import date, datetime
from typing import List

import pytz
from dateutil.relativedelta import relativedelta

from .config import get_config

_TRAIN_NUMBER = re.compile(r'[0-9]{1,4}[A-Za-z]?')
_STATION_NAME = re.compile(r'[\u4e00-\u9fff\u3400-\u4dbfA-Za-z0-9_\s\-()（）]+')
_DATE = re.compile(r'[0-9]{4}-[0-9]{2}-[0-9]{2}')
_TIME = re.compile(r'([0-1]?[0-9]|2[0-3]):[0-5][0-9]')
_CLEAN_QUERY = re.compile(
    r'[\u4e00-\u9fff\u3400-\u4dbfA-Za-z0-9_\s\-.,!?()（）「」『』：。，！？→←↑↓+=]+'
)
_NUMBER = re.compile(r'[0-9]+')

MAX_DATE_DISTANCE = relativedelta(years=1)


def validate_train_number(train_number: str) -> bool:
    """1-4 digits with an optional letter suffix, e.g. 152, 1234, 152A."""
    return _TRAIN_NUMBER.fullmatch(train_number.strip()) is not None


def validate_station_name(station_name: str) -> bool:
    """Chinese or Latin station names, with spaces, hyphens and brackets."""
    return _STATION_NAME.fullmatch(station_name.strip()) is not None


def validate_date_format(date_str: str, today: date = None) -> bool:
    """
    Validate a YYYY-MM-DD date no more than one year before or after today.

    Args:
        date_str: Date string to check
        today: Reference date; defaults to today in the configured timezone
    """
    if not _DATE.fullmatch(date_str):
        return False

    try:
        parsed = datetime.strptime(date_str, '%Y-%m-%d').date()
    except ValueError:
        return False

    if today is None:
        today = datetime.now(pytz.timezone(get_config().timezone)).date()

    return today - MAX_DATE_DISTANCE <= parsed <= today + MAX_DATE_DISTANCE


def validate_time_format(time_str: str) -> bool:
    """24-hour H:mm or HH:mm."""
    return _TIME.fullmatch(time_str) is not None


def is_clean_query(query: str) -> bool:
    """True if query only uses characters expected in a timetable question."""
    return _CLEAN_QUERY.fullmatch(query) is not None


def extract_numbers(text: str) -> List[int]:
    return [int(n) for n in _NUMBER.findall(text)]
