"""
Date token resolution for price questions.

Two forms are understood:
  - relative: a weekday name (full or abbreviated), "today" or "yesterday";
  - US numeric: MM-DD, MM-DD-YY or MM-DD-YYYY, separated by '-' or '/'.

Relative dates always resolve to the most recent past or current occurrence.
"""

import re
from datetime import date, timedelta
from typing import Optional

_WEEKDAYS = {
    "monday": 0, "mon": 0,
    "tuesday": 1, "tue": 1, "tues": 1,
    "wednesday": 2, "wed": 2,
    "thursday": 3, "thu": 3, "thur": 3, "thurs": 3,
    "friday": 4, "fri": 4,
    "saturday": 5, "sat": 5,
    "sunday": 6, "sun": 6,
}

_RELATIVE_OFFSETS = {"today": 0, "yesterday": 1}

_US_DATE = re.compile(r"^(\d{1,2})[-/](\d{1,2})(?:[-/](\d+))?$")

YEAR_WINDOW_BEFORE = 50


def window_two_digit_year(two_digit_year: int, current_year: int) -> int:
    """Place a 2-digit year within [current_year - 50, current_year + 49]."""
    pivot = current_year - YEAR_WINDOW_BEFORE
    return pivot + (two_digit_year - pivot) % 100


def days_back(token: str, today: date) -> Optional[int]:
    """Number of days to walk back from *today* for a relative token, or None."""
    if token in _RELATIVE_OFFSETS:
        return _RELATIVE_OFFSETS[token]
    if token in _WEEKDAYS:
        return (today.weekday() - _WEEKDAYS[token]) % 7
    return None


def parse_us_date(token: str, today: date) -> Optional[date]:
    match = _US_DATE.match(token)
    if not match:
        return None
    month, day, year_text = match.groups()
    if year_text is None:
        year = today.year
    elif len(year_text) == 4:
        year = int(year_text)
    elif len(year_text) == 2:
        year = window_two_digit_year(int(year_text), today.year)
    else:
        return None
    try:
        return date(year, int(month), int(day))
    except ValueError:
        return None


def parse_date_token(token: str, today: date) -> Optional[date]:
    """Resolve a lower-cased date token against *today*; None when unparseable."""
    offset = days_back(token, today)
    if offset is not None:
        return today - timedelta(days=offset)
    return parse_us_date(token, today)
