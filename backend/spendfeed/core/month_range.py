"""Month Range — inclusive-start / exclusive-end date bounds for one calendar month.

Invariants:
    - start is always the 1st of (year, month)
    - end is the 1st of the following month; December rolls over to January of year + 1
    - month outside 1..12 raises InvalidPeriodError (never wraps around)
    - Pure, no IO

Design Decisions:
    - Built from datetime.date arithmetic, not string formatting: no
      zero-padding cases to get wrong for single/double-digit months
"""

import calendar
from dataclasses import dataclass
from datetime import date

from spendfeed.core.domain_types import FIRST_MONTH, LAST_MONTH
from spendfeed.core.errors import InvalidPeriodError


@dataclass(frozen=True)
class MonthRange:
    """Date bounds of one calendar month: start <= d < end."""
    start: date
    end: date

    def __contains__(self, day: date) -> bool:
        return self.start <= day < self.end


def validate_period(year: int, month: int) -> None:
    """Raise InvalidPeriodError unless (year, month) names a real month."""
    if not FIRST_MONTH <= month <= LAST_MONTH:
        raise InvalidPeriodError(year, month)
    if not date.min.year <= year <= date.max.year:
        raise InvalidPeriodError(year, month)


def month_range(year: int, month: int) -> MonthRange:
    """Compute [first day of month, first day of next month)."""
    validate_period(year, month)
    start = date(year, month, 1)
    if month == LAST_MONTH:
        if year == date.max.year:
            raise InvalidPeriodError(year, month)
        end = date(year + 1, FIRST_MONTH, 1)
    else:
        end = date(year, month + 1, 1)
    return MonthRange(start=start, end=end)


def day_of_month(year: int, month: int, day: int) -> date | None:
    """Return the date for (year, month, day), or None if that day does not exist.

    Used by the daily views, which iterate up to MAX_DAY_OF_MONTH for every
    month: day 31 of April is "no data", not an error.
    """
    validate_period(year, month)
    if day < 1 or day > calendar.monthrange(year, month)[1]:
        return None
    return date(year, month, day)


def days_in_month(year: int, month: int) -> int:
    """Number of real calendar days in (year, month)."""
    validate_period(year, month)
    return calendar.monthrange(year, month)[1]
