"""Month Range — tests for calendar month bounds and day lookup.

Tests cover:
    - Literal bounds for January, September, December (year rollover)
    - Every month: end is the first day of the next month
    - Months outside 1..12 raise InvalidPeriodError, never wrap
    - day_of_month returns None for days missing from the calendar
"""

from datetime import date

import pytest

from spendfeed.core.errors import InvalidPeriodError
from spendfeed.core.month_range import (
    MonthRange, day_of_month, days_in_month, month_range,
)


# ─── month_range ─────────────────────────────────────────────────

def test_january_range():
    assert month_range(2024, 1) == MonthRange(date(2024, 1, 1), date(2024, 2, 1))


def test_september_range_crosses_into_two_digit_month():
    assert month_range(2024, 9) == MonthRange(date(2024, 9, 1), date(2024, 10, 1))


def test_december_rolls_over_to_next_year():
    assert month_range(2024, 12) == MonthRange(date(2024, 12, 1), date(2025, 1, 1))


@pytest.mark.parametrize("month", range(1, 12))
def test_end_is_first_of_following_month(month):
    bounds = month_range(2023, month)
    assert bounds.start == date(2023, month, 1)
    assert bounds.end == date(2023, month + 1, 1)


@pytest.mark.parametrize("month", [0, 13, -1, 24])
def test_invalid_month_raises(month):
    with pytest.raises(InvalidPeriodError) as exc_info:
        month_range(2024, month)
    assert exc_info.value.code == "INVALID_PERIOD"
    assert exc_info.value.http_status == 400
    assert exc_info.value.month == month


def test_last_representable_december_raises():
    with pytest.raises(InvalidPeriodError):
        month_range(9999, 12)


def test_range_contains_is_half_open():
    bounds = month_range(2024, 3)
    assert date(2024, 3, 1) in bounds
    assert date(2024, 3, 31) in bounds
    assert date(2024, 4, 1) not in bounds
    assert date(2024, 2, 29) not in bounds


# ─── day_of_month ────────────────────────────────────────────────

def test_day_of_month_existing_day():
    assert day_of_month(2024, 4, 30) == date(2024, 4, 30)


def test_day_31_of_thirty_day_month_is_none():
    assert day_of_month(2024, 4, 31) is None


def test_leap_day():
    assert day_of_month(2024, 2, 29) == date(2024, 2, 29)
    assert day_of_month(2023, 2, 29) is None


def test_day_of_month_rejects_invalid_month():
    with pytest.raises(InvalidPeriodError):
        day_of_month(2024, 13, 1)


def test_days_in_month():
    assert days_in_month(2024, 2) == 29
    assert days_in_month(2024, 4) == 30
    assert days_in_month(2024, 12) == 31
