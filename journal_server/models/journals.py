from __future__ import annotations

from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from ..services.journals import JournalRecord


class JournalPayload(BaseModel):
    """Body for creating or replacing a journal entry.

    Every field is optional at the schema level so the route can answer with
    a plain 400 "Missing required fields" instead of a 422 listing. ``userId``
    is kept as text and parsed by the route, like the query-string ids.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    title: Optional[str] = None
    mood: Optional[str] = None
    description: Optional[str] = None
    user_id: Optional[str] = Field(default=None, alias="userId")

    @model_validator(mode="before")
    @classmethod
    def _coerce_numbers(cls, data: Any) -> Any:
        # lists and objects are left for field validation to reject
        if not isinstance(data, dict):
            return data
        data = dict(data)
        for key in ("title", "mood", "description", "userId", "user_id"):
            value = data.get(key)
            if isinstance(value, (int, float)) and not isinstance(value, bool):
                data[key] = str(value)
        return data

    def is_complete(self) -> bool:
        fields = (self.title, self.mood, self.description, self.user_id)
        return all(value and value.strip() for value in fields)


class JournalResponse(BaseModel):
    journal: JournalRecord


class JournalListResponse(BaseModel):
    journals: List[JournalRecord] = Field(default_factory=list)


class JournalDeleteResponse(BaseModel):
    success: bool = True
