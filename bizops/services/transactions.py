# bizops/services/transactions.py
from __future__ import annotations

import logging
import math
from datetime import date, datetime, timezone

from sqlalchemy.exc import SQLAlchemyError

from ..errors import StorageError, ValidationError
from ..extensions import db
from ..models import Transaction
from ..utils.helpers import format_date
from .periods import apply_period

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("customerName", "phoneNumber", "service", "amountPaid", "serviceBy", "date")
_MISSING_MSG = "Required fields missing: " + ", ".join(REQUIRED_FIELDS)


def query_transactions(period: str | None = None, today: date | None = None):
    """Base query for a period; callers decide ordering."""
    return apply_period(Transaction.query, Transaction.date, period, today)


def list_transactions(period: str | None = None, today: date | None = None) -> list[Transaction]:
    """Transactions in the period, newest created first."""
    try:
        return (query_transactions(period, today)
                .order_by(Transaction.created_at.desc(), Transaction.id.desc())
                .all())
    except SQLAlchemyError as e:
        logger.error(f"[transactions] List failed: {e}")
        raise StorageError("Failed to load transactions") from e


def _text(payload: dict, key: str) -> str:
    v = payload.get(key)
    return str(v).strip() if v is not None else ""


def _amount(value, field: str) -> float:
    try:
        n = float(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field} must be a number") from None
    if not math.isfinite(n) or n < 0:
        raise ValidationError(f"{field} must be a number >= 0")
    return n


def validate_transaction(payload: dict) -> dict:
    """Check a raw payload and return model kwargs; raises ValidationError."""
    if not isinstance(payload, dict):
        raise ValidationError(_MISSING_MSG)
    data = {k: _text(payload, k) for k in REQUIRED_FIELDS if k not in ("amountPaid", "date")}
    raw_amount = payload.get("amountPaid")
    raw_date = payload.get("date")

    # Falsy amountPaid (0, "", None) counts as missing
    if not all(data.values()) or not raw_amount or not raw_date:
        raise ValidationError(_MISSING_MSG)

    amount_paid = _amount(raw_amount, "amountPaid")
    if amount_paid == 0:
        raise ValidationError(_MISSING_MSG)

    raw_expenses = payload.get("expenses")
    expenses = _amount(raw_expenses, "expenses") if raw_expenses else 0.0

    try:
        day = format_date(raw_date)
    except ValueError as e:
        raise ValidationError(f"Invalid date: {e}") from e

    return {
        "customer_name": data["customerName"],
        "phone_number": data["phoneNumber"],
        "service": data["service"],
        "amount_paid": amount_paid,
        "service_by": data["serviceBy"],
        "expenses": expenses,
        "date": day,
    }


def create_transaction(payload: dict, now: datetime | None = None) -> Transaction:
    """
    Validate and insert one transaction.
    - expenses defaults to 0 when absent/falsy
    - date normalized to YYYY-MM-DD
    - created_at assigned here and never changed
    """
    fields = validate_transaction(payload or {})
    txn = Transaction(created_at=now or datetime.now(timezone.utc), **fields)
    try:
        db.session.add(txn)
        db.session.commit()
    except SQLAlchemyError as e:
        db.session.rollback()
        logger.error(f"[transactions] Insert failed: {e}")
        raise StorageError("Failed to save transaction") from e

    logger.info(f"[transactions] New transaction added: {txn.customer_name} - {txn.service} - ₦{txn.amount_paid}")
    return txn
