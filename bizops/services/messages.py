# bizops/services/messages.py
from __future__ import annotations

import logging
from datetime import datetime, timezone

from sqlalchemy.exc import SQLAlchemyError

from ..errors import StorageError, ValidationError
from ..extensions import db
from ..models import Message
from ..utils.helpers import display_time

logger = logging.getLogger(__name__)


def list_messages() -> list[Message]:
    """Chat history, oldest first."""
    try:
        return Message.query.order_by(Message.created_at.asc(), Message.id.asc()).all()
    except SQLAlchemyError as e:
        logger.error(f"[messages] List failed: {e}")
        raise StorageError("Failed to load messages") from e


def send_message(text, sender, now: datetime | None = None) -> Message:
    text = str(text) if text is not None else ""
    sender = (str(sender) if sender is not None else "").strip()
    # text is stored as sent; only blank-ness is checked
    if not text.strip() or not sender:
        raise ValidationError("Text and sender are required")

    created = now or datetime.now(timezone.utc)
    msg = Message(text=text, sender=sender, created_at=created, display_time=display_time(created))
    try:
        db.session.add(msg)
        db.session.commit()
    except SQLAlchemyError as e:
        db.session.rollback()
        logger.error(f"[messages] Insert failed: {e}")
        raise StorageError("Failed to save message") from e
    return msg
