# bizops/services/backup.py
"""
Daily snapshots of the SQLite database file.

One file per calendar day (business_<YYYY-MM-DD>.db); a second run on the
same day overwrites it. The last successful backup date is kept on the
manager instead of being inferred from file timestamps.
"""
from __future__ import annotations

import logging
import shutil
import threading
from datetime import date
from pathlib import Path

from flask import Flask, current_app
from sqlalchemy.engine import make_url

from ..errors import BackupError

logger = logging.getLogger(__name__)

EXTENSION_KEY = "bizops.backups"


def sqlite_file_from_uri(uri: str | None) -> Path | None:
    """Path of a file-backed SQLite database, else None (memory / other engines)."""
    if not uri:
        return None
    url = make_url(uri)
    if url.get_backend_name() != "sqlite":
        return None
    if not url.database or url.database == ":memory:":
        return None
    return Path(url.database)


class BackupManager:
    def __init__(self, source: Path | None, backup_dir: Path):
        self.source = source
        self.backup_dir = backup_dir
        self.last_backup_date: date | None = None
        self._lock = threading.Lock()

    def path_for(self, day: date) -> Path:
        return self.backup_dir / f"business_{day.isoformat()}.db"

    def backup_now(self, today: date | None = None) -> Path | None:
        today = today or date.today()
        if self.source is None or not self.source.exists():
            logger.warning(f"[backup] Database file not found ({self.source}); skipping backup")
            return None

        target = self.path_for(today)
        # File-level copy; writes landing mid-copy are not guarded against
        with self._lock:
            try:
                self.backup_dir.mkdir(parents=True, exist_ok=True)
                shutil.copyfile(self.source, target)
            except OSError as e:
                logger.error(f"[backup] Copy to {target} failed: {e}")
                raise BackupError(f"Backup to {target} failed") from e
            self.last_backup_date = today

        logger.info(f"[backup] Database backed up to {target}")
        return target


def init_backups(app: Flask) -> BackupManager:
    source = sqlite_file_from_uri(app.config.get("SQLALCHEMY_DATABASE_URI"))
    manager = BackupManager(source, Path(app.config["DB_BACKUP_PATH"]))
    app.extensions[EXTENSION_KEY] = manager
    return manager


def get_backup_manager() -> BackupManager:
    return current_app.extensions[EXTENSION_KEY]


def backup_now(today: date | None = None) -> Path | None:
    return get_backup_manager().backup_now(today)
