"""FastAPI application factory and configuration."""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

import structlog
from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from content_admin import __version__
from content_admin.api.routes import (
    categories_router,
    health_router,
    news_router,
    posts_router,
)
from content_admin.core.config import settings
from content_admin.core.exceptions import AppException
from content_admin.storage.base import StorageBackend
from content_admin.storage.memory import InMemoryStorage


# Configure structured logging
logging.basicConfig(format="%(message)s", level=settings.log_level.upper())

structlog.configure(
    processors=[
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
        structlog.processors.JSONRenderer() if settings.log_format == "json" else structlog.dev.ConsoleRenderer(),
    ],
    wrapper_class=structlog.stdlib.BoundLogger,
    context_class=dict,
    logger_factory=structlog.stdlib.LoggerFactory(),
    cache_logger_on_first_use=True,
)

logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler for startup/shutdown."""
    storage: StorageBackend = app.state.storage
    logger.info(
        "Starting Content Admin API",
        environment=settings.app_env,
        debug=settings.app_debug,
        storage=type(storage).__name__,
        categories=len(await storage.get_categories()),
    )

    yield

    logger.info("Shutting down Content Admin API")


def create_app(storage: StorageBackend | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Serve with ``uvicorn --factory content_admin.api.main:create_app`` so the
    store is built once by the server process, not on import.

    Args:
        storage: Storage backend shared by every request. A fresh
            InMemoryStorage is created when omitted.
    """
    app = FastAPI(
        title="Content Admin API",
        description="Posts, news articles and categories for the admin panel",
        version=__version__,
        docs_url="/docs" if settings.is_development else None,
        redoc_url="/redoc" if settings.is_development else None,
        lifespan=lifespan,
    )

    # One store per process, injected into routes via get_storage
    if storage is None:
        storage = InMemoryStorage(seed=settings.seed_default_categories)
    app.state.storage = storage

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Exception handlers
    @app.exception_handler(AppException)
    async def app_exception_handler(request: Request, exc: AppException) -> JSONResponse:
        """Handle application-specific exceptions."""
        logger.warning(
            "Application exception",
            code=exc.code,
            message=exc.message,
            details=exc.details,
            path=request.url.path,
        )
        return JSONResponse(
            status_code=exc.status_code,
            content={
                "error": exc.code,
                "message": exc.message,
                "details": exc.details,
            },
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        """Handle unexpected exceptions."""
        logger.error("Unhandled exception", error=str(exc), exc_info=True)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "error": "INTERNAL_ERROR",
                "message": "An unexpected error occurred",
            },
        )

    # Include routers
    app.include_router(health_router)
    app.include_router(categories_router)
    app.include_router(posts_router)
    app.include_router(news_router)

    # Root endpoint
    @app.get("/")
    async def root() -> dict[str, str]:
        """Root endpoint."""
        return {
            "service": "Content Admin API",
            "version": __version__,
            "status": "running",
        }

    return app


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "content_admin.api.main:create_app",
        factory=True,
        host=settings.app_host,
        port=settings.app_port,
        reload=settings.is_development,
    )
