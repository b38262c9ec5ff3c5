"""
FastAPI Application Factory.
Creates and configures the FastAPI application with all routers, middleware, and DI.

Endpoints:
- conversations (participants, messages), messages (reactions, bookmarks), users
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from dishka import AsyncContainer
from dishka.integrations.fastapi import setup_dishka
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware

from chatcore.config.logging_config import (
    NO_CORRELATION_ID,
    correlation_id_var,
    setup_logging,
)
from chatcore.config.settings import Config, validate_config
from chatcore.domain.exceptions import (
    AccessDeniedError,
    ConflictError,
    DomainValidationError,
    EntityNotFoundError,
    StorageUnavailableError,
)
from chatcore.presentation.api import (
    conversations_router,
    messages_router,
    users_router,
)
from chatcore.setup.ioc import create_container

# Setup logging
setup_logging(Config.LOG_LEVEL, Config.LOG_PATH)

logger = logging.getLogger(__name__)

DOMAIN_ERROR_STATUS = {
    DomainValidationError: 400,
    AccessDeniedError: 403,
    EntityNotFoundError: 404,
    ConflictError: 409,
    StorageUnavailableError: 503,
}


class CorrelationIdMiddleware(BaseHTTPMiddleware):
    """Middleware to extract and set correlation ID from request headers."""

    async def dispatch(self, request: Request, call_next):
        correlation_id = request.headers.get("X-Correlation-ID", NO_CORRELATION_ID)

        # Set in contextvars (propagates to async tasks and logging)
        correlation_id_var.set(correlation_id)

        response = await call_next(request)
        response.headers["X-Correlation-ID"] = correlation_id
        return response


def _domain_error_handler(status_code: int):
    async def handler(request: Request, exc: Exception) -> JSONResponse:
        if status_code >= 500:
            logger.warning(f"[{request.method} {request.url.path}] {exc}")
        else:
            logger.info(f"[{request.method} {request.url.path}] {status_code}: {exc}")
        return JSONResponse(
            status_code=status_code,
            content={"error": getattr(exc, "message", str(exc))},
        )

    return handler


def _without_context(errors: list) -> list:
    # Pydantic error contexts may hold exception objects
    return [
        {key: value for key, value in error.items() if key != "ctx"} for error in errors
    ]


def create_fastapi_app(container: Optional[AsyncContainer] = None) -> FastAPI:
    """
    Application factory for creating FastAPI app.

    Args:
        container: prebuilt Dishka container (tests pass one over an
            in-memory store); built from Config when omitted

    Returns:
        FastAPI application instance
    """
    validate_config()
    if container is None:
        container = create_container()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info(
            f"Chat service started (storage backend: {Config.STORAGE_BACKEND})"
        )
        yield
        # Disconnects Prisma when that backend is in use
        await container.close()
        logger.info("Chat service shutdown. DI container closed.")

    app = FastAPI(
        title="Chat Core API",
        description="Conversations, participants, messages, reactions and bookmarks",
        version="1.0.0",
        lifespan=lifespan,
    )

    # Setup Dishka BEFORE app starts (must add middleware before startup)
    setup_dishka(container, app)

    app.add_middleware(CorrelationIdMiddleware)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    for exc_class, status_code in DOMAIN_ERROR_STATUS.items():
        app.add_exception_handler(exc_class, _domain_error_handler(status_code))

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        errors = exc.errors()
        logger.info(f"[VALIDATION ERROR] {errors}")
        return JSONResponse(
            status_code=400,
            content={"error": "Validation error", "details": _without_context(errors)},
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        logger.info(f"[HTTP ERROR {exc.status_code}] {exc.detail}")
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": exc.detail},
        )

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        logger.exception(f"[GLOBAL ERROR] {type(exc).__name__}: {exc}")
        return JSONResponse(
            status_code=500,
            content={"error": "Internal server error"},
        )

    @app.get("/health", tags=["health"])
    async def health():
        return {"status": "healthy"}

    app.include_router(conversations_router)
    app.include_router(messages_router)
    app.include_router(users_router)

    return app


app = create_fastapi_app()
