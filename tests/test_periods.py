"""Period names -> date bounds."""

from __future__ import annotations

from datetime import date

import pytest

from bizops.services.periods import PeriodBound, resolve_period


@pytest.mark.parametrize("period", [None, "", "all", "fortnight", "DECADE"])
def test_all_and_unknown_periods_mean_no_filter(period) -> None:
    assert resolve_period(period, date(2024, 7, 1)) is None


def test_day_is_exact_match_on_today() -> None:
    assert resolve_period("day", date(2024, 7, 1)) == PeriodBound("2024-07-01", exact=True)


def test_week_goes_back_seven_days_across_month_edge() -> None:
    assert resolve_period("week", date(2024, 3, 3)) == PeriodBound("2024-02-25")


def test_month_is_calendar_aware_and_clamps_short_months() -> None:
    assert resolve_period("month", date(2024, 7, 1)).value == "2024-06-01"
    assert resolve_period("month", date(2024, 3, 31)).value == "2024-02-29"
    assert resolve_period("month", date(2024, 1, 15)).value == "2023-12-15"


def test_year_handles_leap_day() -> None:
    assert resolve_period("year", date(2024, 7, 1)).value == "2023-07-01"
    assert resolve_period("year", date(2024, 2, 29)).value == "2023-02-28"


def test_period_names_are_trimmed_and_case_insensitive() -> None:
    assert resolve_period(" Week ", date(2024, 7, 10)) == PeriodBound("2024-07-03")
