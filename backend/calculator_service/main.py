"""Calculator Service — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map CalculatorError → JSON responses
    - Store manager built in lifespan and held on app.state (no module-level singleton)
    - A failed startup connection is logged, never fatal

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Request logging middleware wraps every route, including unmatched paths
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from calculator_service.api.error_handlers import register_error_handlers
from calculator_service.api.middleware import RequestLoggingMiddleware
from calculator_service.api.routes import arithmetic, health, users
from calculator_service.config import get_settings
from calculator_service.infrastructure.database import DatabaseSessionManager
from calculator_service.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(
        settings.log_level, settings.log_format,
        settings.log_dir, settings.service_name,
    )
    manager = DatabaseSessionManager(
        settings.resolved_database_url(),
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    await manager.connect()
    app.state.db_manager = manager
    logger.info("Calculator service started")
    yield
    logger.info("Calculator service shutting down")
    await manager.dispose()


app = FastAPI(
    title="Calculator Service", version="1.0.0", lifespan=lifespan,
)

app.add_middleware(RequestLoggingMiddleware)

app.include_router(health.router)
app.include_router(arithmetic.router)
app.include_router(users.router)

register_error_handlers(app)


def run() -> None:
    """Console entry point: serve the app with uvicorn."""
    settings = get_settings()
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
