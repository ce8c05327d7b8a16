from .journals import JournalDeleteResponse, JournalListResponse, JournalPayload, JournalResponse
from .meta import HealthResponse, RootResponse
from .summary import SummaryResponse
from .users import AuthRequest, AuthResponse

__all__ = [
    "AuthRequest",
    "AuthResponse",
    "HealthResponse",
    "JournalDeleteResponse",
    "JournalListResponse",
    "JournalPayload",
    "JournalResponse",
    "RootResponse",
    "SummaryResponse",
]
