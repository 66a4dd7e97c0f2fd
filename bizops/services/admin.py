# bizops/services/admin.py
from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from sqlalchemy.exc import SQLAlchemyError

from ..errors import ConfirmationError, StorageError
from ..extensions import db
from ..models import Message, Transaction
from .backup import backup_now

logger = logging.getLogger(__name__)

CLEAR_CONFIRMATION = "YES_DELETE_ALL_DATA"


@dataclass
class ClearResult:
    transactions: int
    messages: int
    backup_path: Path | None


def clear_all_data(confirmation) -> ClearResult:
    """
    Empty both tables after an exact confirmation token.

    Order: backup (synchronous) -> delete transactions + messages in ONE
    database transaction. A failed backup aborts before anything is deleted.
    """
    if confirmation != CLEAR_CONFIRMATION:
        raise ConfirmationError(f'Confirmation required. Send confirmClear: "{CLEAR_CONFIRMATION}"')

    backup_path = backup_now()

    try:
        n_txn = db.session.query(Transaction).delete(synchronize_session=False)
        n_msg = db.session.query(Message).delete(synchronize_session=False)
        db.session.commit()
    except SQLAlchemyError as e:
        db.session.rollback()
        logger.error(f"[admin] Clear failed, rolled back: {e}")
        raise StorageError("Failed to clear data") from e

    logger.warning(f"[admin] Cleared {n_txn} transactions and {n_msg} messages (backup={backup_path})")
    return ClearResult(transactions=n_txn, messages=n_msg, backup_path=backup_path)
