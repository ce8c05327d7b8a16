"""Response utilities."""

from typing import Any, Dict, Optional

from fastapi.responses import JSONResponse


def error_response(message: str, *, status_code: int, detail: Optional[Any] = None) -> JSONResponse:
    """Create the JSON error body shared by every route: ``{"ok": false, "error": ...}``."""
    payload: Dict[str, Any] = {"ok": False, "error": message}
    if detail:
        payload["detail"] = detail
    return JSONResponse(payload, status_code=status_code)
