from __future__ import annotations

import sqlite3
from typing import List, Optional, Tuple

from ...utils import parse_iso, to_storage_timestamp, utc_now
from ..database import SQLiteStore
from .models import UserRecord


class DuplicateEmail(Exception):
    """Raised when inserting an email that is already registered."""


class UserStore(SQLiteStore):
    """Persistence for user accounts backed by SQLite."""

    def insert(self, email: str, password_hash: str) -> UserRecord:
        with self._session() as conn:
            try:
                cursor = conn.execute(
                    "INSERT INTO user (email, password_hash, created_at) VALUES (?, ?, ?)",
                    (email, password_hash, to_storage_timestamp(utc_now())),
                )
            except sqlite3.IntegrityError as exc:
                raise DuplicateEmail(email) from exc
            row = conn.execute("SELECT * FROM user WHERE id = ?", (cursor.lastrowid,)).fetchone()
        return self._row_to_record(row)

    def fetch_credentials(self, email: str) -> Optional[Tuple[UserRecord, str]]:
        with self._session() as conn:
            row = conn.execute("SELECT * FROM user WHERE email = ?", (email,)).fetchone()
        if row is None:
            return None
        return self._row_to_record(row), row["password_hash"]

    def exists(self, email: str) -> bool:
        with self._session() as conn:
            row = conn.execute("SELECT 1 FROM user WHERE email = ?", (email,)).fetchone()
        return row is not None

    def list_all(self) -> List[UserRecord]:
        with self._session() as conn:
            rows = conn.execute("SELECT * FROM user ORDER BY id").fetchall()
        return [self._row_to_record(row) for row in rows]

    def _row_to_record(self, row: sqlite3.Row) -> UserRecord:
        return UserRecord(
            id=row["id"],
            email=row["email"],
            created_at=parse_iso(row["created_at"]),
        )


__all__ = ["DuplicateEmail", "UserStore"]
