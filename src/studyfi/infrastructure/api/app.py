"""FastAPI application factory and configuration.

Creates the FastAPI application with middleware, routes, exception handlers
and lifecycle handlers.
"""

import uuid
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from studyfi.core.config import get_settings
from studyfi.core.logging import bind_correlation_id, clear_context, configure_logging, get_logger
from studyfi.domain.exceptions import (
    InvalidResetTokenError,
    NotFoundError,
    PasswordPolicyViolation,
    ResetTokenExpiredError,
)
from studyfi.infrastructure.persistence.database import (
    close_database,
    get_db_manager,
    init_database,
)

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager.

    Initializes the database on startup and disposes the engine on shutdown.
    """
    settings = get_settings()
    configure_logging(settings)

    logger.info(
        "Starting Studyfi",
        app_name=settings.app_name,
        version=settings.app_version,
        environment=settings.environment,
    )

    try:
        await init_database()
        logger.info("Database initialized successfully")
    except Exception as e:
        logger.error("Failed to initialize database", error=str(e))
        raise

    yield

    logger.info("Shutting down Studyfi")
    await close_database()
    logger.info("Database connection closed")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    Returns:
        FastAPI: Configured FastAPI application instance.
    """
    settings = get_settings()

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        description="Account and study group membership service",
        docs_url="/docs" if settings.is_development else None,
        redoc_url="/redoc" if settings.is_development else None,
        openapi_url="/openapi.json" if settings.is_development else None,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=settings.cors_allow_methods,
        allow_headers=settings.cors_allow_headers,
    )

    register_health_check(app)
    register_routes(app)
    register_exception_handlers(app)
    register_middleware(app)

    return app


def register_health_check(app: FastAPI) -> None:
    """Register health check endpoints."""

    @app.get("/health", tags=["health"])
    async def health_check():
        """Liveness check; does not touch the database."""
        return {
            "status": "healthy",
            "service": "Studyfi",
            "version": get_settings().app_version,
        }

    @app.get("/ready", tags=["health"])
    async def readiness_check():
        """Readiness check including database connectivity."""
        db_healthy = await get_db_manager().check_connection()

        if db_healthy:
            return {
                "status": "ready",
                "service": "Studyfi",
                "version": get_settings().app_version,
                "database": "connected",
            }
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={
                "status": "not_ready",
                "service": "Studyfi",
                "database": "disconnected",
            },
        )


def register_routes(app: FastAPI) -> None:
    """Register API routes."""
    from studyfi.infrastructure.api.routes import groups_router, users_router

    settings = get_settings()

    app.include_router(users_router, prefix=f"{settings.api_prefix}/users", tags=["users"])
    app.include_router(groups_router, prefix=f"{settings.api_prefix}/groups", tags=["groups"])


def register_exception_handlers(app: FastAPI) -> None:
    """Map domain errors to HTTP responses."""

    @app.exception_handler(NotFoundError)
    async def not_found_handler(request: Request, exc: NotFoundError):
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content={"error": "Not found", "detail": str(exc)},
        )

    @app.exception_handler(PasswordPolicyViolation)
    async def password_policy_handler(request: Request, exc: PasswordPolicyViolation):
        logger.info("Password rejected by policy", path=request.url.path, code=exc.code)
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={
                "error": "Validation error",
                "details": [
                    {"field": exc.error.field, "message": exc.error.message, "code": exc.error.code}
                ],
            },
        )

    @app.exception_handler(InvalidResetTokenError)
    async def invalid_token_handler(request: Request, exc: InvalidResetTokenError):
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"error": "Invalid token", "detail": str(exc), "code": "invalid_token"},
        )

    @app.exception_handler(ResetTokenExpiredError)
    async def expired_token_handler(request: Request, exc: ResetTokenExpiredError):
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"error": "Token expired", "detail": str(exc), "code": "token_expired"},
        )

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        logger.error(
            "Unhandled exception",
            path=str(request.url),
            method=request.method,
            error=str(exc),
            exc_type=type(exc).__name__,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "error": "Internal server error",
                "detail": str(exc) if get_settings().debug else "An unexpected error occurred",
            },
        )


def register_middleware(app: FastAPI) -> None:
    """Register request logging middleware."""

    @app.middleware("http")
    async def logging_middleware(request: Request, call_next):
        """Log each request and propagate a correlation ID."""
        correlation_id = request.headers.get("X-Correlation-ID", f"cid_{uuid.uuid4().hex[:12]}")
        bind_correlation_id(correlation_id)

        logger.info("Request started", method=request.method, path=request.url.path)

        try:
            response = await call_next(request)
            logger.info(
                "Request completed",
                method=request.method,
                path=request.url.path,
                status_code=response.status_code,
            )
            response.headers["X-Correlation-ID"] = correlation_id
            return response
        finally:
            clear_context()


# Create the application instance
app = create_app()
