"""
Credit Sync - Main Application Entry Point

Serves credit decisions and order validation/processing over HTTP and,
when enabled, runs the order sync job in the background.
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

import structlog
from fastapi import FastAPI, Response
from fastapi.responses import RedirectResponse

from credit_sync import __version__
from credit_sync.application.services import OrderSyncJob, OrderSyncScheduler
from credit_sync.core.config import settings
from credit_sync.core.logging import setup_logging
from credit_sync.core.metrics import get_metrics, get_metrics_content_type
from credit_sync.infrastructure.cache import DedupCache
from credit_sync.infrastructure.clients import HttpOrderSourceClient
from credit_sync.infrastructure.database import db_manager
from credit_sync.infrastructure.repositories import SqlAlchemyOrderRepository
from credit_sync.presentation.api import v1_router
from credit_sync.presentation.middleware import (
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
    - Initialize database connection pool
    - Start the background order sync, if enabled
    """
    setup_logging()
    db_manager.init()
    if settings.db_create_tables:
        await db_manager.create_tables()

    logger = structlog.get_logger(__name__)

    scheduler = None
    if settings.sync_enabled:
        job = OrderSyncJob(
            order_source=HttpOrderSourceClient(),
            order_repository=SqlAlchemyOrderRepository(db_manager.session_factory),
            cache=app.state.dedup_cache,
        )
        scheduler = OrderSyncScheduler(job, settings.sync_interval_seconds)
        await scheduler.start()

    logger.info("application_started", version=__version__)

    yield

    if scheduler is not None:
        await scheduler.stop()
    await db_manager.close()
    logger.info("application_stopped")


app = FastAPI(
    title="Credit Sync",
    description="Credit Decisioning & Order Synchronization Service",
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
    lifespan=lifespan,
)

# One dedup cache per application; the API and the scheduler share it.
app.state.dedup_cache = DedupCache()

app.add_middleware(LoggingMiddleware)
app.add_middleware(RequestContextMiddleware)

error_handler_middleware(app)

app.include_router(v1_router)


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
