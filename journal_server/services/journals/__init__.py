from __future__ import annotations

from functools import lru_cache

from ...config import get_settings
from .models import JournalRecord
from .store import JournalStore


@lru_cache(maxsize=1)
def get_journal_store() -> JournalStore:
    return JournalStore(get_settings().database_path)


__all__ = [
    "JournalRecord",
    "JournalStore",
    "get_journal_store",
]
