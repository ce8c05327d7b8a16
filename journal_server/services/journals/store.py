from __future__ import annotations

import sqlite3
from typing import Any, Dict, List, Optional

from ...logging_config import logger
from ...utils import parse_iso, to_storage_timestamp, utc_now
from ..database import SQLiteStore
from ..errors import ValidationError
from ..summary.state import JournalEntry
from .models import JournalRecord


class JournalStore(SQLiteStore):
    """Persistence for journal entries backed by SQLite."""

    def insert(self, *, user_id: int, title: str, mood: str, description: str) -> JournalRecord:
        payload = {
            "user_id": user_id,
            "title": title,
            "mood": mood,
            "description": description,
            "created_at": to_storage_timestamp(utc_now()),
        }
        with self._session() as conn:
            try:
                cursor = conn.execute(
                    "INSERT INTO journal (user_id, title, mood, description, created_at)"
                    " VALUES (:user_id, :title, :mood, :description, :created_at)",
                    payload,
                )
            except sqlite3.IntegrityError as exc:
                logger.info("journal insert rejected", extra={"user_id": user_id, "error": str(exc)})
                raise ValidationError(f"Unknown user: {user_id}") from exc
            journal_id = int(cursor.lastrowid)
            row = conn.execute("SELECT * FROM journal WHERE id = ?", (journal_id,)).fetchone()
        return self._row_to_record(row)

    def fetch_one(self, journal_id: int) -> Optional[JournalRecord]:
        with self._session() as conn:
            row = conn.execute("SELECT * FROM journal WHERE id = ?", (journal_id,)).fetchone()
        return self._row_to_record(row) if row else None

    def list_for_user(self, user_id: int) -> List[JournalRecord]:
        with self._session() as conn:
            rows = conn.execute(
                "SELECT * FROM journal WHERE user_id = ? ORDER BY id",
                (user_id,),
            ).fetchall()
        return [self._row_to_record(row) for row in rows]

    def fetch_entries(self, user_id: int) -> List[JournalEntry]:
        """Entries for the summary pipeline, oldest first."""
        return [record.to_entry() for record in self.list_for_user(user_id)]

    def update(self, journal_id: int, fields: Dict[str, Any]) -> Optional[JournalRecord]:
        if not fields:
            return self.fetch_one(journal_id)
        assignments = ", ".join(f"{key} = :{key}" for key in fields.keys())
        sql = f"UPDATE journal SET {assignments} WHERE id = :journal_id"
        with self._session() as conn:
            cursor = conn.execute(sql, {**fields, "journal_id": journal_id})
            if cursor.rowcount == 0:
                return None
            row = conn.execute("SELECT * FROM journal WHERE id = ?", (journal_id,)).fetchone()
        return self._row_to_record(row)

    def delete(self, journal_id: int) -> bool:
        with self._session() as conn:
            cursor = conn.execute("DELETE FROM journal WHERE id = ?", (journal_id,))
            return cursor.rowcount > 0

    def _row_to_record(self, row: sqlite3.Row) -> JournalRecord:
        data = dict(row)
        data["created_at"] = parse_iso(data["created_at"])
        return JournalRecord.model_validate(data)


__all__ = ["JournalStore"]
