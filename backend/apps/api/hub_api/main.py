"""
Student Hub Feed API - FastAPI application entry point.

This module initializes the FastAPI application and configures
middleware, routers, error handlers, and lifecycle events.
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from hub_core import get_logger, init_logging

from .config import settings
from .routers import feeds

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifecycle manager.

    Args:
        app: The FastAPI application instance.

    Yields:
        None during application runtime.
    """
    init_logging(settings.log_level)
    logger.info("Starting %s v%s", settings.app_name, settings.version)

    yield

    logger.info("Shutting down %s", settings.app_name)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Render HTTP errors as ``{"error": <message>}``."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Render request validation errors in the common error shape."""
    return JSONResponse(status_code=422, content={"error": "Invalid request parameters"})


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Log unexpected failures and answer with the generic feed error."""
    logger.exception("Unhandled error", extra={"path": request.url.path})
    return JSONResponse(
        status_code=500, content={"error": "Failed to fetch or parse the RSS feed"}
    )


def create_app() -> FastAPI:
    """
    Build a configured FastAPI application.

    Returns:
        New application instance.
    """
    app = FastAPI(
        title=settings.app_name,
        description="Student Hub - feed ingestion and media normalization API",
        version=settings.version,
        lifespan=lifespan,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
    )

    # Configure CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

    # Register API routers
    app.include_router(feeds.router, prefix="/feed", tags=["Feeds"])

    @app.get("/health")
    async def health_check() -> dict[str, str]:
        """
        Health check endpoint.

        Returns:
            Dictionary containing service status and version.
        """
        return {"status": "healthy", "version": settings.version}

    return app


app = create_app()
