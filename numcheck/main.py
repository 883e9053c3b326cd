"""numcheck API: FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map NumCheckError → structured JSON responses
    - Database manager created on startup and disposed on shutdown via lifespan

Design Decisions:
    - Manager kept on app.state, not a module global: each app instance owns
      its own engine and tests can install their own
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from numcheck.api.error_handlers import register_error_handlers
from numcheck.api.routes import health, numbers
from numcheck.config import get_settings
from numcheck.infrastructure.database import DatabaseSessionManager
from numcheck.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    app.state.db_manager = DatabaseSessionManager(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    logger.info("numcheck API started")
    yield
    await app.state.db_manager.dispose()
    logger.info("numcheck API shutting down")


app = FastAPI(title="numcheck API", version="1.0.0", lifespan=lifespan)

app.include_router(health.router)
app.include_router(numbers.router)

register_error_handlers(app)
