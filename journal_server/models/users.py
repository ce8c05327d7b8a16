from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict

from ..services.users import UserRecord


class AuthRequest(BaseModel):
    model_config = ConfigDict(extra="ignore")

    email: Optional[str] = None
    password: Optional[str] = None
    action: Optional[str] = None


class AuthResponse(BaseModel):
    user: UserRecord
