"""Statistics Schemas — Pydantic models for monthly expenditure responses.

Invariants:
    - Day maps carry keys 1..31 (or the month's real days when calendar-correct mode is on)
    - Category maps carry keys 1..6
    - null amounts mean "no data", distinct from a recorded 0
"""

from datetime import date

from pydantic import BaseModel, ConfigDict


class ExpenditureRecordOut(BaseModel):
    """One expenditure entry on the statistics page."""
    model_config = ConfigDict(from_attributes=True)

    expenditure_category: int | None = None
    context: str
    amount: int | None = None
    article_seq: int
    consumption_date: date | None = None


class PeriodResponse(BaseModel):
    user_seq: int
    year: int
    month: int


class DailyExpendituresResponse(PeriodResponse):
    days: dict[int, list[ExpenditureRecordOut]]


class CalendarResponse(PeriodResponse):
    days: dict[int, int | None]


class ChartResponse(PeriodResponse):
    categories: dict[int, int | None]


class MonthTotalResponse(PeriodResponse):
    total: int | None = None
