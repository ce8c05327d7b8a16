"""Service layer components."""

from .errors import StoreError, ValidationError
from .journals import JournalRecord, JournalStore, get_journal_store
from .summary import SummaryResult, SummarySource, SummaryService, get_summary_service
from .users import UserRecord, UserService, UserStore, get_user_service


__all__ = [
    "StoreError",
    "ValidationError",
    "JournalRecord",
    "JournalStore",
    "get_journal_store",
    "SummaryResult",
    "SummarySource",
    "SummaryService",
    "get_summary_service",
    "UserRecord",
    "UserService",
    "UserStore",
    "get_user_service",
]
