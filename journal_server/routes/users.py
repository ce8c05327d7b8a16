from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends

from ..models import AuthRequest, AuthResponse
from ..services import UserRecord, UserService, ValidationError, get_user_service

router = APIRouter(tags=["users"])


@router.post("/auth", response_model=AuthResponse)
# Register a new account or log in to an existing one, selected by "action"
def authenticate(
    payload: AuthRequest,
    service: UserService = Depends(get_user_service),
) -> AuthResponse:
    if not (payload.email or "").strip() or not payload.password:
        raise ValidationError("Email and password are required")

    if payload.action == "register":
        user = service.register(payload.email, payload.password)
    elif payload.action == "login":
        user = service.login(payload.email, payload.password)
    else:
        raise ValidationError("Invalid action")
    return AuthResponse(user=user)


@router.get("/users", response_model=List[UserRecord])
def list_users(service: UserService = Depends(get_user_service)) -> List[UserRecord]:
    return service.list_users()


__all__ = ["router"]
