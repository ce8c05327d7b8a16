from __future__ import annotations

import json

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from .config import get_settings
from .logging_config import configure_logging, logger
from .routes import api_router
from .services import StoreError, ValidationError
from .utils import error_response


# Register global exception handlers for consistent error responses across the API
def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(ValidationError)
    async def _input_exception_handler(request: Request, exc: ValidationError):
        logger.debug("rejected input", extra={"error": str(exc), "path": str(request.url)})
        return error_response(str(exc), status_code=status.HTTP_400_BAD_REQUEST)

    @app.exception_handler(StoreError)
    async def _store_exception_handler(request: Request, exc: StoreError):
        logger.exception("database failure", extra={"path": str(request.url)})
        return error_response("Database error", status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)

    @app.exception_handler(RequestValidationError)
    async def _validation_exception_handler(request: Request, exc: RequestValidationError):
        logger.debug("validation error", extra={"errors": exc.errors(), "path": str(request.url)})
        return error_response(
            "Invalid request",
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=json.loads(json.dumps(exc.errors(), default=str)),
        )

    @app.exception_handler(HTTPException)
    async def _http_exception_handler(request: Request, exc: HTTPException):
        logger.debug(
            "http error",
            extra={"detail": exc.detail, "status": exc.status_code, "path": str(request.url)},
        )
        detail = exc.detail
        if not isinstance(detail, str):
            detail = json.dumps(detail)
        return error_response(detail, status_code=exc.status_code)

    @app.exception_handler(Exception)
    async def _unhandled_exception_handler(request: Request, exc: Exception):
        logger.exception("Unhandled error", extra={"path": str(request.url)})
        return error_response(
            "Internal server error",
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )


def create_app() -> FastAPI:
    settings = get_settings()
    configure_logging(settings.log_level)

    application = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        docs_url=settings.resolved_docs_url,
        redoc_url=None,
    )

    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(application)
    application.include_router(api_router)

    logger.info(
        "journal server configured",
        extra={"database": str(settings.database_path), "ollama": settings.ollama_base_url},
    )
    return application


app = create_app()


__all__ = ["app", "create_app"]
