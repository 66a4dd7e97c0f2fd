"""Daily backups and the confirmed clear-all."""

from __future__ import annotations

from datetime import date
from pathlib import Path

import pytest

from bizops.errors import BackupError, ConfirmationError, ValidationError
from bizops.models import Message, Transaction
from bizops.services.admin import CLEAR_CONFIRMATION, clear_all_data
from bizops.services.backup import BackupManager, backup_now, get_backup_manager, sqlite_file_from_uri
from bizops.services.messages import send_message


def _backups(app) -> list[Path]:
    folder = Path(app.config["DB_BACKUP_PATH"])
    return sorted(folder.glob("*.db")) if folder.exists() else []


def test_backup_twice_same_day_keeps_one_file(ctx, make_txn) -> None:
    make_txn()
    first = backup_now(today=date(2024, 7, 1))
    make_txn(customerName="Later")
    second = backup_now(today=date(2024, 7, 1))

    assert first == second
    assert first.name == "business_2024-07-01.db"
    assert [p.name for p in _backups(ctx)] == ["business_2024-07-01.db"]
    assert get_backup_manager().last_backup_date == date(2024, 7, 1)


def test_backups_on_different_days_are_separate(ctx) -> None:
    backup_now(today=date(2024, 7, 1))
    backup_now(today=date(2024, 7, 2))
    assert len(_backups(ctx)) == 2


def test_missing_source_is_skipped(tmp_path) -> None:
    manager = BackupManager(tmp_path / "nope.db", tmp_path / "backups")
    assert manager.backup_now(date(2024, 7, 1)) is None
    assert manager.last_backup_date is None
    assert not (tmp_path / "backups").exists()


def test_copy_failure_raises_backup_error(tmp_path) -> None:
    source = tmp_path / "business.db"
    source.write_bytes(b"sqlite")
    blocker = tmp_path / "backups"
    blocker.write_text("a file where the folder should be")

    with pytest.raises(BackupError):
        BackupManager(source, blocker).backup_now(date(2024, 7, 1))


@pytest.mark.parametrize(
    "uri, expected",
    [
        ("sqlite:////srv/data/business.db", Path("/srv/data/business.db")),
        ("sqlite://", None),
        ("sqlite:///:memory:", None),
        ("postgresql://u:p@localhost/biz", None),
        (None, None),
    ],
)
def test_sqlite_file_from_uri(uri, expected) -> None:
    assert sqlite_file_from_uri(uri) == expected


@pytest.mark.parametrize("token", [None, "", "yes", "YES_DELETE_ALL", "yes_delete_all_data"])
def test_clear_with_wrong_token_changes_nothing(ctx, make_txn, token) -> None:
    make_txn()
    send_message("hello", "portal")

    with pytest.raises(ConfirmationError) as info:
        clear_all_data(token)

    assert isinstance(info.value, ValidationError)
    assert Transaction.query.count() == 1
    assert Message.query.count() == 1
    assert _backups(ctx) == []


def test_clear_with_token_empties_both_tables_after_backup(ctx, make_txn) -> None:
    make_txn()
    make_txn(customerName="Bola")
    send_message("hello", "portal")

    result = clear_all_data(CLEAR_CONFIRMATION)

    assert (result.transactions, result.messages) == (2, 1)
    assert Transaction.query.count() == 0
    assert Message.query.count() == 0
    assert result.backup_path == Path(ctx.config["DB_BACKUP_PATH"]) / f"business_{date.today().isoformat()}.db"
    assert result.backup_path.exists()


def test_clear_aborts_when_backup_fails(ctx, make_txn, monkeypatch) -> None:
    make_txn()

    def _boom(self, today=None):
        raise BackupError("disk full")

    monkeypatch.setattr(BackupManager, "backup_now", _boom)

    with pytest.raises(BackupError):
        clear_all_data(CLEAR_CONFIRMATION)
    assert Transaction.query.count() == 1
