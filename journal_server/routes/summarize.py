from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, Query

from ..models import SummaryResponse
from ..services import SummaryService, get_summary_service
from .params import require_int

router = APIRouter(tags=["summary"])


@router.get("/summarize", response_model=SummaryResponse)
# Build an insight summary of the user's journal, optionally answering a question
async def summarize(
    user_id: Optional[str] = Query(default=None, alias="userId"),
    query: Optional[str] = Query(default=None),
    service: SummaryService = Depends(get_summary_service),
) -> SummaryResponse:
    owner = require_int(user_id, "User ID is required")
    result = await service.generate(owner, query)
    return SummaryResponse(summary=result.text, last_updated=result.generated_at)


__all__ = ["router"]
