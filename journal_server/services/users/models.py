from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class UserRecord(BaseModel):
    """Public view of a user account; the password hash never leaves the store."""

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: int
    email: str
    created_at: datetime = Field(alias="createdAt")


__all__ = ["UserRecord"]
