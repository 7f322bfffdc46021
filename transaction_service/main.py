"""
Transaction Service - Main Application Entry Point

An in-memory banking transaction API with per-account duplicate
detection and cached reads.
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

import structlog
from fastapi import FastAPI, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import RedirectResponse

from transaction_service import __version__
from transaction_service.core.config import Settings, settings
from transaction_service.core.dependencies import cache_manager
from transaction_service.core.logging import setup_logging
from transaction_service.core.metrics import get_metrics, get_metrics_content_type
from transaction_service.presentation.api import api_router
from transaction_service.presentation.middleware import (
    LoggingMiddleware,
    REQUEST_ID_HEADER,
    RequestContextMiddleware,
    error_handler_middleware,
)

logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Configure logging on startup; drop cached snapshots on shutdown."""
    setup_logging()

    logger.info(
        "application_started",
        version=__version__,
        duplicate_window_seconds=settings.duplicate_window_seconds,
        cache_max_size=settings.cache_max_size,
        cache_ttl_seconds=settings.cache_ttl_seconds,
    )

    yield

    cache_manager.clear_all()
    logger.info("application_stopped")


def create_app(config: Settings = settings) -> FastAPI:
    """
    Build the FastAPI application.

    Middleware runs outermost first: request context, then request
    logging, then CORS.
    """
    application = FastAPI(
        title="Transaction Service",
        description="In-memory banking transaction API",
        version=__version__,
        lifespan=lifespan,
    )

    application.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET", "POST", "PUT", "DELETE"],
        allow_headers=["*"],
        expose_headers=[REQUEST_ID_HEADER],
    )
    application.add_middleware(LoggingMiddleware)
    application.add_middleware(RequestContextMiddleware)

    error_handler_middleware(application)

    application.include_router(api_router)

    if config.metrics_enabled:
        @application.get("/metrics", include_in_schema=False)
        async def metrics() -> Response:
            return Response(
                content=get_metrics(),
                media_type=get_metrics_content_type(),
            )

    @application.get("/", include_in_schema=False)
    async def root() -> RedirectResponse:
        return RedirectResponse(url="/docs")

    return application


app = create_app()
