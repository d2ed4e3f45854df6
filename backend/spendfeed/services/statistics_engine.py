"""Statistics Engine — monthly expenditure views for one user.

Invariants:
    - Daily views cover days 1..max_day_of_month (31) for every month; days
      missing from the calendar (e.g. April 31) resolve to [] / None without a query
    - calendar_correct_days=True limits daily views to the month's real days
    - Category and month totals are bounded by month_range() (start <= d < end)
    - Absent aggregate -> None ("no data"), never 0
    - Any failing sub-query fails the whole operation (no partially filled map)
    - Month outside 1..12 -> InvalidPeriodError before any query is issued

Design Decisions:
    - One reader call per day / per category, gathered concurrently under a
      semaphore; results land in a pre-keyed map, keys enumerate ascending
    - Stateless: every call works on freshly fetched data
"""

import asyncio
import logging
from datetime import date
from typing import Awaitable, Callable, TypeVar

from spendfeed.core.domain_types import MAX_DAY_OF_MONTH, UserSeq
from spendfeed.core.expenditure_views import (
    ExpenditureRecord, category_keys, day_keys, fill_fixed_keys,
    to_expenditure_records,
)
from spendfeed.core.month_range import (
    day_of_month, days_in_month, month_range, validate_period,
)
from spendfeed.core.repository_protocols import ExpenditureReader
from spendfeed.services.concurrency import gather_or_cancel

logger = logging.getLogger(__name__)

T = TypeVar("T")


class StatisticsEngine:
    """Daily records, daily totals, category totals and month total."""

    def __init__(
        self,
        reader: ExpenditureReader,
        max_day_of_month: int = MAX_DAY_OF_MONTH,
        calendar_correct_days: bool = False,
        concurrency: int = 8,
    ):
        self.reader = reader
        self.max_day_of_month = max_day_of_month
        self.calendar_correct_days = calendar_correct_days
        self.concurrency = max(1, concurrency)

    # ─── Daily views ─────────────────────────────────────────────

    async def daily_expenditures(
        self, user_seq: UserSeq, year: int, month: int,
    ) -> dict[int, list[ExpenditureRecord]]:
        """Map day -> expenditure records consumed on that day."""

        async def fetch(day: date) -> list[ExpenditureRecord]:
            rows = await self.reader.get_expenditures_on(user_seq, day)
            return to_expenditure_records(rows)

        values = await self._per_day(year, month, fetch)
        result = {day: values.get(day, []) for day in self._day_keys(year, month)}
        self._log("daily_expenditures", user_seq, year, month)
        return result

    async def daily_totals(
        self, user_seq: UserSeq, year: int, month: int,
    ) -> dict[int, int | None]:
        """Map day -> total amount spent that day (None = no data)."""

        async def fetch(day: date) -> int | None:
            return await self.reader.sum_amount_on(user_seq, day)

        values = await self._per_day(year, month, fetch)
        result = fill_fixed_keys(self._day_keys(year, month), values, None)
        self._log("daily_totals", user_seq, year, month)
        return result

    # ─── Month views ─────────────────────────────────────────────

    async def category_totals(
        self, user_seq: UserSeq, year: int, month: int,
    ) -> dict[int, int | None]:
        """Map category 1..6 -> amount spent within the month (None = no data)."""
        bounds = month_range(year, month)
        keys = category_keys()
        sem = asyncio.Semaphore(self.concurrency)

        async def fetch(category: int) -> int | None:
            async with sem:
                return await self.reader.sum_amount_between(
                    user_seq, bounds.start, bounds.end, category=category,
                )

        totals = await gather_or_cancel(fetch(c) for c in keys)
        result = fill_fixed_keys(keys, dict(zip(keys, totals)), None)
        self._log("category_totals", user_seq, year, month)
        return result

    async def month_total(
        self, user_seq: UserSeq, year: int, month: int,
    ) -> int | None:
        """Total amount spent across all categories within the month."""
        bounds = month_range(year, month)
        total = await self.reader.sum_amount_between(
            user_seq, bounds.start, bounds.end,
        )
        self._log("month_total", user_seq, year, month)
        return total

    # ─── Helpers ─────────────────────────────────────────────────

    def _day_keys(self, year: int, month: int) -> list[int]:
        if self.calendar_correct_days:
            return day_keys(days_in_month(year, month))
        return day_keys(self.max_day_of_month)

    async def _per_day(
        self, year: int, month: int,
        fetch: Callable[[date], Awaitable[T]],
    ) -> dict[int, T]:
        """Run fetch for every existing day; nonexistent days are left out."""
        validate_period(year, month)
        sem = asyncio.Semaphore(self.concurrency)
        days: list[tuple[int, date]] = []
        for day in self._day_keys(year, month):
            actual = day_of_month(year, month, day)
            if actual is not None:
                days.append((day, actual))

        async def bounded(actual: date) -> T:
            async with sem:
                return await fetch(actual)

        values = await gather_or_cancel(bounded(actual) for _, actual in days)
        return {day: value for (day, _), value in zip(days, values)}

    @staticmethod
    def _log(operation: str, user_seq: UserSeq, year: int, month: int) -> None:
        logger.info(
            f"Computed {operation}",
            extra={"user_seq": user_seq, "year": year, "month": month},
        )
