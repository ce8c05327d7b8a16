from __future__ import annotations

from fastapi import APIRouter

from .journals import router as journals_router
from .meta import router as meta_router
from .summarize import router as summarize_router
from .users import router as users_router

api_router = APIRouter(prefix="/api/v1")
api_router.include_router(meta_router)
api_router.include_router(users_router)
api_router.include_router(journals_router)
api_router.include_router(summarize_router)

__all__ = ["api_router"]
