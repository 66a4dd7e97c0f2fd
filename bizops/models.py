from __future__ import annotations
from datetime import datetime, timezone

from .extensions import db
from .utils.helpers import iso_timestamp


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


# --------------------------
# Transactions
# --------------------------
# Column names keep the camelCase layout of existing business.db files.
class Transaction(db.Model):
    __tablename__ = "transactions"
    __table_args__ = (
        db.Index("ix_transactions_date", "date"),
        {"sqlite_autoincrement": True},
    )

    id = db.Column(db.Integer, primary_key=True, autoincrement=True)
    customer_name = db.Column("customerName", db.Text, nullable=False)
    phone_number = db.Column("phoneNumber", db.Text, nullable=False)
    service = db.Column(db.Text, nullable=False)  # open set, not an enum
    amount_paid = db.Column("amountPaid", db.Float, nullable=False)
    service_by = db.Column("serviceBy", db.Text, nullable=False)
    expenses = db.Column(db.Float, nullable=False, default=0.0)

    # YYYY-MM-DD text so period bounds compare lexicographically
    date = db.Column(db.String(10), nullable=False)
    created_at = db.Column("timestamp", db.DateTime(timezone=True), default=_utcnow, nullable=False)

    @property
    def net_profit(self) -> float:
        return self.amount_paid - self.expenses

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "customerName": self.customer_name,
            "phoneNumber": self.phone_number,
            "service": self.service,
            "amountPaid": self.amount_paid,
            "serviceBy": self.service_by,
            "expenses": self.expenses,
            "date": self.date,
            "timestamp": iso_timestamp(self.created_at),
        }


# --------------------------
# Messages (Portal <-> Dashboard)
# --------------------------
class Message(db.Model):
    __tablename__ = "messages"
    __table_args__ = {"sqlite_autoincrement": True}

    id = db.Column(db.Integer, primary_key=True, autoincrement=True)
    text = db.Column(db.Text, nullable=False)
    sender = db.Column(db.Text, nullable=False)
    created_at = db.Column("timestamp", db.DateTime(timezone=True), default=_utcnow, nullable=False)
    display_time = db.Column("time", db.Text, nullable=False)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "text": self.text,
            "sender": self.sender,
            "timestamp": iso_timestamp(self.created_at),
            "time": self.display_time,
        }
