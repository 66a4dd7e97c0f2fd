# bizops/services/export.py
"""
Transaction export in two shapes:

* csv  - quoted rows, newest first, per-row net profit
* json - summary block + the full ordered transaction list

CSV fields are wrapped in quotes as-is; embedded quote characters are NOT
escaped, so values containing '"' produce malformed rows.
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Iterable

from ..models import Transaction
from ..utils.helpers import iso_timestamp, plain_number
from .analytics import summarize
from .periods import PERIODS
from .transactions import list_transactions

CSV_HEADER = "Date,Customer Name,Phone Number,Service,Amount Paid,Service By,Expenses,Net Profit,Timestamp"


@dataclass
class ExportResult:
    body: object        # str for csv, dict for json
    mimetype: str
    filename: str | None = None


def export_filename(period: str | None, now: datetime) -> str:
    # only known period names reach the Content-Disposition header
    name = (period or "all").strip().lower()
    if name not in PERIODS:
        name = "all"
    return f"business_export_{name}_{now.date().isoformat()}.csv"


def render_csv(rows: Iterable[Transaction]) -> str:
    lines = [CSV_HEADER]
    for t in rows:
        cells = [
            t.date,
            t.customer_name,
            t.phone_number,
            t.service,
            plain_number(t.amount_paid),
            t.service_by,
            plain_number(t.expenses),
            plain_number(t.net_profit),
            iso_timestamp(t.created_at),
        ]
        lines.append(",".join(f'"{c}"' for c in cells))
    return "\n".join(lines) + "\n"


def build_json_export(rows: list[Transaction], period: str | None, now: datetime) -> dict:
    totals = summarize(rows)
    return {
        "summary": {
            "totalTransactions": totals.transaction_count,
            "totalIncome": totals.total_income,
            "totalExpenses": totals.total_expenses,
            "netProfit": totals.net_income,
            "exportDate": iso_timestamp(now),
            "filter": period or "all",
        },
        "transactions": [t.to_dict() for t in rows],
    }


def export_transactions(period: str | None = None, fmt: str | None = None,
                        now: datetime | None = None) -> ExportResult:
    now = now or datetime.now(timezone.utc)
    rows = list_transactions(period, today=now.astimezone().date())

    if fmt == "csv":
        return ExportResult(render_csv(rows), "text/csv", export_filename(period, now))
    return ExportResult(build_json_export(rows, period, now), "application/json")
