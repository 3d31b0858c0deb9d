"""pm-api: FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map PmError -> structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Database initialized on startup and disposed on shutdown via lifespan
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from pm_api.api.error_handlers import register_error_handlers
from pm_api.api.middleware import RequestLoggingMiddleware
from pm_api.api.routes import accounts, health, projects, statuses, tasks
from pm_api.config import get_settings
from pm_api.infrastructure.database import close_db, init_db
from pm_api.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    logger.info("pm-api started")
    yield
    await close_db()
    logger.info("pm-api shutting down")


app = FastAPI(title="pm-api", version="1.0.0", lifespan=lifespan)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(RequestLoggingMiddleware)

app.include_router(health.router)
app.include_router(accounts.router)
app.include_router(projects.router)
app.include_router(statuses.router)
app.include_router(tasks.router)

register_error_handlers(app)
