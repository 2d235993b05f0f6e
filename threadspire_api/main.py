"""
Entry point for the Threadspire HTTP API.

This module creates the FastAPI application, wires up middleware and error
handlers, and mounts all routers under the configured API prefix.

Intended usage:
    uvicorn threadspire_api.main:app --host 0.0.0.0 --port 8080
"""

from __future__ import annotations

import uuid
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Dict, Mapping, Optional

import structlog
from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from threadspire_api.config import DEFAULT_JWT_SECRET, AppEnv, Settings, get_config
from threadspire_api.db.session import init_db
from threadspire_api.logging import get_logger
from threadspire_api.logging.config import configure_logging
from threadspire_api.routers import analytics, auth, bookmarks, collections, forks, reactions, threads
from threadspire_api.services.errors import (
    AuthenticationError,
    ConflictError,
    NotFoundError,
    ThreadspireError,
)

logger = get_logger("threadspire_api")

_STATUS_BY_ERROR = {
    NotFoundError: status.HTTP_404_NOT_FOUND,
    ConflictError: status.HTTP_409_CONFLICT,
    AuthenticationError: status.HTTP_401_UNAUTHORIZED,
}


def _error_response(
    status_code: int,
    code: str,
    message: str,
    details: Optional[Mapping[str, Any]] = None,
    headers: Optional[Dict[str, str]] = None,
) -> JSONResponse:
    body = {"error": {"code": code, "message": message, "details": details}}
    return JSONResponse(
        status_code=status_code,
        content=jsonable_encoder(body),
        headers=headers,
    )


# ---------------------------------------------------------------------------
# Error handlers
# ---------------------------------------------------------------------------


async def _handle_domain_error(request: Request, exc: ThreadspireError) -> JSONResponse:
    status_code = _STATUS_BY_ERROR.get(type(exc), status.HTTP_400_BAD_REQUEST)
    headers = None
    if isinstance(exc, AuthenticationError):
        headers = {"WWW-Authenticate": "Bearer"}

    logger.info("request_failed", code=exc.code, status=status_code, reason=exc.message)
    return _error_response(status_code, exc.code, exc.message, exc.details, headers)


async def _handle_validation_error(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    return _error_response(
        status.HTTP_422_UNPROCESSABLE_ENTITY,
        "validation_error",
        "Request validation failed.",
        {"errors": exc.errors()},
    )


async def _handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("unhandled_error", error_type=type(exc).__name__)
    return _error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "internal_error",
        "Internal server error.",
    )


# ---------------------------------------------------------------------------
# Application factory
# ---------------------------------------------------------------------------


def _check_settings(settings: Settings) -> None:
    if settings.APP_ENV == AppEnv.PRODUCTION and settings.JWT_SECRET == DEFAULT_JWT_SECRET:
        raise RuntimeError(
            "JWT_SECRET must be set to a non-default value in production."
        )


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """
    Startup: create missing tables. Shutdown: log only.
    """
    settings = get_config()
    logger.info(
        "app_startup",
        env=settings.APP_ENV.value,
        version=settings.VERSION,
        api_root=settings.api_root,
    )
    init_db()
    yield
    logger.info("app_shutdown")


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Create and configure the FastAPI application instance.
    """
    settings = settings or get_config()
    _check_settings(settings)
    configure_logging(settings)

    app = FastAPI(
        title="Threadspire API",
        version=settings.VERSION,
        lifespan=lifespan,
        openapi_url="/openapi.json" if settings.ENABLE_DOCS else None,
        docs_url="/docs" if settings.ENABLE_DOCS else None,
        redoc_url="/redoc" if settings.ENABLE_DOCS else None,
    )

    # CORS configuration
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def _request_context(request: Request, call_next: Any) -> Any:
        request_id = request.headers.get("X-Request-ID") or uuid.uuid4().hex
        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(
            request_id=request_id,
            method=request.method,
            path=request.url.path,
        )
        response = await call_next(request)
        response.headers["X-Request-ID"] = request_id
        return response

    app.add_exception_handler(ThreadspireError, _handle_domain_error)
    app.add_exception_handler(RequestValidationError, _handle_validation_error)
    app.add_exception_handler(Exception, _handle_unexpected_error)

    # Simple health check
    @app.get("/health", tags=["system"])
    async def health() -> dict:
        return {
            "status": "ok",
            "version": settings.VERSION,
            "api_root": settings.api_root,
        }

    api_root = settings.api_root
    app.include_router(auth.router, prefix=api_root)
    app.include_router(threads.router, prefix=api_root)
    app.include_router(forks.router, prefix=api_root)
    app.include_router(reactions.router, prefix=api_root)
    app.include_router(bookmarks.router, prefix=api_root)
    app.include_router(collections.router, prefix=api_root)
    app.include_router(analytics.router, prefix=api_root)

    return app


# Default application instance
app = create_app()


def run() -> None:
    """
    Console entry point: serve ``threadspire_api.main:app`` with uvicorn.
    """
    import uvicorn

    settings = get_config()
    uvicorn.run(
        "threadspire_api.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.RELOAD,
    )


if __name__ == "__main__":
    run()
