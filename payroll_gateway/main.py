"""
Payroll Gateway - Main Application Entry Point

A payroll-deducted loan service: simulates installment options, underwrites
loan requests against salary-band score thresholds and records the
monthly installment schedule of approved loans.
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

import structlog
from fastapi import FastAPI, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import RedirectResponse

from payroll_gateway import __version__
from payroll_gateway.core.config import settings
from payroll_gateway.core.logging import setup_logging
from payroll_gateway.core.metrics import get_metrics, get_metrics_content_type
from payroll_gateway.core.rate_limit import InMemoryRateLimitStore
from payroll_gateway.infrastructure.database import db_manager
from payroll_gateway.presentation.api import api_router
from payroll_gateway.presentation.middleware import (
    LoggingMiddleware,
    RateLimitMiddleware,
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
    - Clean up on shutdown
    """
    setup_logging()
    db_manager.init()

    logger = structlog.get_logger(__name__)
    logger.info("application_started", version=__version__)

    yield

    await db_manager.close()
    logger.info("application_stopped")


rate_limit_store = InMemoryRateLimitStore()

app = FastAPI(
    title="Payroll Gateway",
    description="Payroll-deducted loan simulation and underwriting service",
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
if settings.rate_limit_enabled:
    app.add_middleware(
        RateLimitMiddleware,
        store=rate_limit_store,
        max_requests=settings.rate_limit_max,
        window_seconds=settings.rate_limit_window_seconds,
    )
app.add_middleware(LoggingMiddleware)
# Outermost, so the request id is bound for every layer below
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


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "payroll_gateway.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )
