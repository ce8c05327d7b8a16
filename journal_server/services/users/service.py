from __future__ import annotations

from typing import List

from ...logging_config import logger
from ..errors import ValidationError
from .models import UserRecord
from .passwords import hash_password, verify_password
from .store import DuplicateEmail, UserStore


def _normalize_email(email: str) -> str:
    return (email or "").strip().lower()


class UserService:
    """Account registration and login on top of :class:`UserStore`."""

    def __init__(self, store: UserStore):
        self._store = store

    def register(self, email: str, password: str) -> UserRecord:
        normalized = _normalize_email(email)
        if self._store.exists(normalized):
            raise ValidationError("User already exists")
        try:
            user = self._store.insert(normalized, hash_password(password))
        except DuplicateEmail as exc:
            # lost a race with a concurrent registration
            raise ValidationError("User already exists") from exc
        logger.info("user registered", extra={"user_id": user.id})
        return user

    def login(self, email: str, password: str) -> UserRecord:
        found = self._store.fetch_credentials(_normalize_email(email))
        if found is None:
            raise ValidationError("User not found")
        user, password_hash = found
        if not verify_password(password, password_hash):
            logger.info("login rejected", extra={"user_id": user.id})
            raise ValidationError("Invalid password")
        return user

    def list_users(self) -> List[UserRecord]:
        return self._store.list_all()


__all__ = ["UserService"]
