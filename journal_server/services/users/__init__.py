from __future__ import annotations

from functools import lru_cache

from ...config import get_settings
from .models import UserRecord
from .passwords import hash_password, verify_password
from .service import UserService
from .store import DuplicateEmail, UserStore


@lru_cache(maxsize=1)
def get_user_service() -> UserService:
    return UserService(UserStore(get_settings().database_path))


__all__ = [
    "DuplicateEmail",
    "UserRecord",
    "UserService",
    "UserStore",
    "get_user_service",
    "hash_password",
    "verify_password",
]
