from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from ..summary.state import JournalEntry


class JournalRecord(BaseModel):
    """Stored journal row as returned to API callers."""

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: int
    user_id: int = Field(alias="userId")
    title: str
    mood: str
    description: str
    created_at: datetime = Field(alias="createdAt")

    def to_entry(self) -> JournalEntry:
        return JournalEntry(
            title=self.title,
            mood=self.mood,
            description=self.description,
            created_at=self.created_at,
        )


__all__ = ["JournalRecord"]
