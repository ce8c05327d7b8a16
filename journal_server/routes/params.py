from __future__ import annotations

from typing import Optional

from ..services import ValidationError


def require_int(raw: Optional[str], message: str) -> int:
    """Parse a required integer query parameter or raise a 400-mapped error."""
    value = (raw or "").strip()
    if not value:
        raise ValidationError(message)
    try:
        return int(value)
    except ValueError as exc:
        raise ValidationError(f"{message}: expected an integer, got {value!r}") from exc


__all__ = ["require_int"]
