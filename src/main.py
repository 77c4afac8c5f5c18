"""FastAPI application entry point for the team KPI engine."""

import time
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from src.api.middleware.error_handler import global_exception_handler
from src.api.middleware.logging import StructuredLoggingMiddleware
from src.api.routes.attendance import router as attendance_router
from src.api.routes.earnings import router as earnings_router
from src.api.routes.health import router as health_router
from src.api.routes.rating import router as rating_router
from src.api.routes.records import router as records_router
from src.config import settings
from src.shared.logging import setup_logging

logger = structlog.get_logger()

# Track app start time for uptime calculation
APP_START_TIME: float = 0.0


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan: startup and shutdown logic."""
    global APP_START_TIME
    APP_START_TIME = time.time()
    setup_logging(settings.log_level)

    logger.info(
        "team_kpi_starting",
        app_name=settings.app_name,
        version=settings.app_version,
        debug=settings.debug,
        pool_rate=settings.pool_rate,
    )

    yield

    logger.info("team_kpi_shutting_down")


app = FastAPI(
    title="Team KPI Engine",
    description="Performance rating and compensation distribution for trading-signal teams",
    version=settings.app_version,
    lifespan=lifespan,
)

# CORS for local development
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"] if settings.debug else [],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Structured logging middleware
app.add_middleware(StructuredLoggingMiddleware)

# Exception handlers; the mapped classes are answered before the catch-all
for exc_class in (ValueError, PermissionError, LookupError, Exception):
    app.add_exception_handler(exc_class, global_exception_handler)

# Register routers
app.include_router(health_router)
app.include_router(rating_router)
app.include_router(earnings_router)
app.include_router(attendance_router)
app.include_router(records_router)


def get_uptime() -> int:
    """Get application uptime in seconds."""
    if APP_START_TIME == 0.0:
        return 0
    return int(time.time() - APP_START_TIME)


def run() -> None:
    import uvicorn

    uvicorn.run("src.main:app", host=settings.host, port=settings.port)
