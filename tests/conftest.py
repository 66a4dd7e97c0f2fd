"""Shared fixtures: an app bound to a throwaway SQLite file and backup dir."""

from __future__ import annotations

from datetime import datetime

import pytest

from bizops import create_app
from bizops.extensions import db
from bizops.services.transactions import create_transaction


@pytest.fixture()
def app(tmp_path):
    app = create_app({
        "TESTING": True,
        "SCHEDULER_ENABLED": False,
        "SQLALCHEMY_DATABASE_URI": None,
        "DB_PATH": str(tmp_path / "business.db"),
        "DB_BACKUP_PATH": str(tmp_path / "backups"),
    })
    yield app
    with app.app_context():
        db.session.remove()
        db.engine.dispose()


@pytest.fixture()
def ctx(app):
    with app.app_context():
        yield app


@pytest.fixture()
def client(app):
    return app.test_client()


@pytest.fixture()
def make_txn():
    """Insert a transaction with sensible defaults; created_at can be pinned."""

    def _make(created_at: datetime | None = None, **overrides):
        payload = {
            "customerName": "Ada",
            "phoneNumber": "0800",
            "service": "Photography",
            "amountPaid": 100,
            "serviceBy": "Tolu",
            "date": "2024-01-01",
        }
        payload.update(overrides)
        return create_transaction(payload, now=created_at)

    return _make
