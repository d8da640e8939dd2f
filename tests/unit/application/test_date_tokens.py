from __future__ import annotations

from datetime import date

import pytest

from src.application.parsing.date_tokens import (
    days_back,
    parse_date_token,
    parse_us_date,
    window_two_digit_year,
)
from tests.support import TODAY


@pytest.mark.parametrize("current_year", [1999, 2026, 2050, 2100])
def test_two_digit_year_window_bounds(current_year: int) -> None:
    years = [window_two_digit_year(yy, current_year) for yy in range(100)]
    assert min(years) == current_year - 50
    assert max(years) == current_year + 49
    assert sorted(y % 100 for y in years) == list(range(100))


@pytest.mark.parametrize(
    ("yy", "expected"),
    [(25, 2025), (26, 2026), (75, 2075), (76, 1976), (99, 1999), (0, 2000)],
)
def test_two_digit_year_window_in_2026(yy: int, expected: int) -> None:
    assert window_two_digit_year(yy, 2026) == expected


def test_days_back() -> None:
    assert days_back("today", TODAY) == 0
    assert days_back("yesterday", TODAY) == 1
    assert days_back("friday", TODAY) == 6
    assert days_back("thu", TODAY) == 0
    assert days_back("10-3", TODAY) is None


def test_parse_us_date_without_year_uses_current_year() -> None:
    assert parse_us_date("3/9", date(2031, 6, 1)) == date(2031, 3, 9)


def test_parse_date_token_rejects_unknown_words() -> None:
    assert parse_date_token("someday", TODAY) is None
    assert parse_date_token("10-3-", TODAY) is None
