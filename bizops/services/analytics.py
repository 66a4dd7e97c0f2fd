# bizops/services/analytics.py
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date
from typing import Iterable

from sqlalchemy.exc import SQLAlchemyError

from ..errors import StorageError
from ..models import Transaction
from .transactions import query_transactions

logger = logging.getLogger(__name__)

# Buckets the dashboard always shows, even at zero
SEEDED_SERVICES = ("Photography", "Makeup", "Product Sales")


@dataclass
class AnalyticsSummary:
    total_income: float = 0.0
    total_expenses: float = 0.0
    transaction_count: int = 0
    service_performance: dict[str, float] = field(
        default_factory=lambda: {name: 0 for name in SEEDED_SERVICES}
    )

    @property
    def net_income(self) -> float:
        return self.total_income - self.total_expenses

    def to_dict(self) -> dict:
        return {
            "totalIncome": self.total_income,
            "totalExpenses": self.total_expenses,
            "netIncome": self.net_income,
            "servicePerformance": dict(self.service_performance),
            "transactionCount": self.transaction_count,
        }


def summarize(txns: Iterable[Transaction]) -> AnalyticsSummary:
    """Single pass over the rows. Raw float sums, no rounding."""
    summary = AnalyticsSummary()
    perf = summary.service_performance
    for t in txns:
        summary.total_income += t.amount_paid
        summary.total_expenses += t.expenses
        summary.transaction_count += 1
        perf[t.service] = perf.get(t.service, 0) + t.amount_paid
    return summary


def compute_analytics(period: str | None = None, today: date | None = None) -> AnalyticsSummary:
    try:
        txns = query_transactions(period, today).all()
    except SQLAlchemyError as e:
        logger.error(f"[analytics] Query failed: {e}")
        raise StorageError("Failed to load transactions") from e
    return summarize(txns)
