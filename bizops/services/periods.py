# bizops/services/periods.py
"""
Named time windows (day/week/month/year/all) -> bound on Transaction.date.

Dates are stored as zero-padded YYYY-MM-DD text, so the bound is a string and
comparisons stay lexicographic. Unknown period names mean "no filter".
"""
from __future__ import annotations

import logging
from calendar import monthrange
from dataclasses import dataclass
from datetime import date, timedelta

logger = logging.getLogger(__name__)

PERIODS = ("all", "day", "week", "month", "year")


@dataclass(frozen=True)
class PeriodBound:
    value: str          # YYYY-MM-DD
    exact: bool = False  # True -> date == value, else date >= value

    def apply(self, column):
        return column == self.value if self.exact else column >= self.value


def _clamp_day(y: int, m: int, desired_day: int) -> int:
    return min(desired_day, monthrange(y, m)[1])


def _add_months(d: date, n: int) -> date:
    y = d.year + (d.month - 1 + n) // 12
    m = (d.month - 1 + n) % 12 + 1
    return date(y, m, _clamp_day(y, m, d.day))


def resolve_period(period: str | None, today: date | None = None) -> PeriodBound | None:
    today = today or date.today()
    name = (period or "all").strip().lower()

    if name == "day":
        return PeriodBound(today.isoformat(), exact=True)
    if name == "week":
        return PeriodBound((today - timedelta(days=7)).isoformat())
    if name == "month":
        return PeriodBound(_add_months(today, -1).isoformat())
    if name == "year":
        return PeriodBound(_add_months(today, -12).isoformat())

    if name != "all":
        logger.debug(f"[periods] Unrecognized period {period!r}; treating as 'all'")
    return None


def apply_period(query, column, period: str | None, today: date | None = None):
    """Narrow a SQLAlchemy query to the period (no-op for all/unknown)."""
    bound = resolve_period(period, today)
    if bound is None:
        return query
    return query.filter(bound.apply(column))
