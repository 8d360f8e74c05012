"""
Loan API - Main Application Entry Point

A multi-tenant loan origination service: borrowers open applications
for a tenant's loan products, submit the dynamic form data each product
requires and receive a rule-based credit decision.
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

import structlog
from fastapi import FastAPI, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import RedirectResponse

from loan_api import __version__
from loan_api.core.config import Settings, get_settings
from loan_api.core.logging import setup_logging
from loan_api.core.metrics import get_metrics, get_metrics_content_type
from loan_api.infrastructure.database import DatabaseSessionManager
from loan_api.presentation.api.v1.router import router as api_router
from loan_api.presentation.middleware import (
    LoggingMiddleware,
    RequestContextMiddleware,
    error_handler_middleware,
)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan manager.

    Handles startup and shutdown events:
    - Set up logging
    - Initialize the database connection pool on app.state
    - Clean up on shutdown
    """
    settings: Settings = app.state.settings
    setup_logging(settings.log_level, settings.log_format)

    db_manager = DatabaseSessionManager(settings)
    db_manager.init()
    if settings.db_create_tables:
        await db_manager.create_tables()
    app.state.db_manager = db_manager

    logger = structlog.get_logger(__name__)
    logger.info("application_started", version=__version__)

    yield

    await db_manager.close()
    logger.info("application_stopped")


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the FastAPI application."""
    settings = settings or get_settings()

    app = FastAPI(
        title="Loan API",
        description="Multi-tenant loan origination and decision service",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(LoggingMiddleware)
    app.add_middleware(RequestContextMiddleware)

    error_handler_middleware(app)

    app.include_router(api_router)

    if settings.metrics_enabled:
        @app.get("/metrics", include_in_schema=False)
        async def metrics() -> Response:
            """Prometheus metrics endpoint."""
            return Response(
                content=get_metrics(),
                media_type=get_metrics_content_type(),
            )

    @app.get("/", include_in_schema=False)
    async def root():
        """Redirect to API documentation."""
        return RedirectResponse(url="/docs")

    return app


app = create_app()
