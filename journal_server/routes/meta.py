from __future__ import annotations

from fastapi import APIRouter, Depends, Request

from ..config import Settings, get_settings
from ..models import HealthResponse, RootResponse

router = APIRouter(tags=["meta"])


@router.get("/health", response_model=HealthResponse)
# Return service health status for monitoring and load balancers
def health(settings: Settings = Depends(get_settings)) -> HealthResponse:
    return HealthResponse(
        ok=True,
        service="journal-server",
        version=settings.app_version,
        database=settings.database_path.name,
    )


@router.get("/meta", response_model=RootResponse)
# Return service metadata including available API endpoints
def meta(request: Request, settings: Settings = Depends(get_settings)) -> RootResponse:
    # the OpenAPI schema flattens included routers into full paths
    paths = request.app.openapi().get("paths", {})
    endpoints = sorted(path for path in paths if path.startswith("/api/"))
    return RootResponse(
        status="ok",
        service="journal-server",
        version=settings.app_version,
        inference_model=settings.ollama_model,
        endpoints=endpoints,
    )


__all__ = ["router"]
