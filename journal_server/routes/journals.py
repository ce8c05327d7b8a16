from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from ..logging_config import logger
from ..models import (
    JournalDeleteResponse,
    JournalListResponse,
    JournalPayload,
    JournalResponse,
)
from ..services import JournalRecord, JournalStore, ValidationError, get_journal_store
from .params import require_int

router = APIRouter(prefix="/journals", tags=["journals"])

MISSING_FIELDS = "Missing required fields"


def _owned_journal(store: JournalStore, journal_id: int, user_id: int) -> JournalRecord:
    existing = store.fetch_one(journal_id)
    if existing is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Journal not found")
    if existing.user_id != user_id:
        logger.info(
            "journal access denied",
            extra={"journal_id": journal_id, "user_id": user_id},
        )
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Unauthorized")
    return existing


@router.post("", response_model=JournalResponse)
def create_journal(
    payload: JournalPayload,
    store: JournalStore = Depends(get_journal_store),
) -> JournalResponse:
    if not payload.is_complete():
        raise ValidationError(MISSING_FIELDS)
    owner = require_int(payload.user_id, "User ID is required")
    record = store.insert(
        user_id=owner,
        title=payload.title,
        mood=payload.mood,
        description=payload.description,
    )
    return JournalResponse(journal=record)


@router.get("", response_model=JournalListResponse)
def list_journals(
    user_id: Optional[str] = Query(default=None, alias="userId"),
    store: JournalStore = Depends(get_journal_store),
) -> JournalListResponse:
    owner = require_int(user_id, "User ID is required")
    return JournalListResponse(journals=store.list_for_user(owner))


@router.put("", response_model=JournalResponse)
def update_journal(
    payload: JournalPayload,
    journal_id: Optional[str] = Query(default=None, alias="id"),
    store: JournalStore = Depends(get_journal_store),
) -> JournalResponse:
    target = require_int(journal_id, "Journal ID is required")
    if not payload.is_complete():
        raise ValidationError(MISSING_FIELDS)

    owner = require_int(payload.user_id, "User ID is required")
    _owned_journal(store, target, owner)
    updated = store.update(
        target,
        {"title": payload.title, "mood": payload.mood, "description": payload.description},
    )
    if updated is None:
        # removed between the ownership check and the update
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Journal not found")
    return JournalResponse(journal=updated)


@router.delete("", response_model=JournalDeleteResponse)
def delete_journal(
    journal_id: Optional[str] = Query(default=None, alias="id"),
    user_id: Optional[str] = Query(default=None, alias="userId"),
    store: JournalStore = Depends(get_journal_store),
) -> JournalDeleteResponse:
    if not (journal_id or "").strip() or not (user_id or "").strip():
        raise ValidationError("Journal ID and User ID are required")
    target = require_int(journal_id, "Journal ID is required")
    owner = require_int(user_id, "User ID is required")

    _owned_journal(store, target, owner)
    store.delete(target)
    return JournalDeleteResponse()


__all__ = ["router"]
