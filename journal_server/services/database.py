from __future__ import annotations

import sqlite3
import threading
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

from ..logging_config import logger
from .errors import StoreError

_SCHEMA_SQL = """
CREATE TABLE IF NOT EXISTS user (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    email TEXT NOT NULL UNIQUE,
    password_hash TEXT NOT NULL,
    created_at TEXT NOT NULL
);

CREATE TABLE IF NOT EXISTS journal (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    user_id INTEGER NOT NULL REFERENCES user (id),
    title TEXT NOT NULL,
    mood TEXT NOT NULL,
    description TEXT NOT NULL,
    created_at TEXT NOT NULL
);

CREATE INDEX IF NOT EXISTS idx_journal_user ON journal (user_id, id);
"""


class SQLiteStore:
    """Shared SQLite plumbing for the user and journal stores."""

    def __init__(self, db_path: Path):
        self._db_path = Path(db_path)
        self._lock = threading.Lock()
        self._ensure_directory()
        self._ensure_schema()

    @property
    def db_path(self) -> Path:
        return self._db_path

    def _ensure_directory(self) -> None:
        try:
            self._db_path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as exc:  # pragma: no cover - defensive
            logger.warning(
                "database directory creation failed",
                extra={"error": str(exc), "path": str(self._db_path)},
            )

    def _connect(self) -> sqlite3.Connection:
        conn = sqlite3.connect(self._db_path, timeout=30, isolation_level=None)
        conn.row_factory = sqlite3.Row
        conn.execute("PRAGMA foreign_keys = ON;")
        return conn

    def _ensure_schema(self) -> None:
        with self._session() as conn:
            conn.execute("PRAGMA journal_mode=WAL;")
            conn.executescript(_SCHEMA_SQL)

    @contextmanager
    def _session(self) -> Iterator[sqlite3.Connection]:
        """Serialised connection; low-level sqlite failures surface as StoreError."""
        with self._lock:
            try:
                conn = self._connect()
            except sqlite3.Error as exc:
                logger.error(
                    "database connection failed",
                    extra={"error": str(exc), "path": str(self._db_path)},
                )
                raise StoreError(f"Could not open database: {exc}") from exc
            try:
                yield conn
            except sqlite3.IntegrityError:
                raise
            except sqlite3.Error as exc:
                logger.error(
                    "database operation failed",
                    extra={"error": str(exc), "path": str(self._db_path)},
                )
                raise StoreError(str(exc)) from exc
            finally:
                conn.close()


__all__ = ["SQLiteStore"]
