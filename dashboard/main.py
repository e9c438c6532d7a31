# dashboard/main.py

"""
Application factory.

Run with:
    uvicorn dashboard.main:create_app --factory
"""

import logging
import asyncio
from typing import Optional
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
from contextlib import asynccontextmanager

from dashboard.adapters.configuration.config import Settings
from dashboard.adapters.outbound.persistence.database import Database
from dashboard.adapters.outbound.persistence.repositories.token_repository import token_repository
from dashboard.adapters.outbound.security.password_hasher import PasswordHasher
from dashboard.adapters.outbound.security.token_manager import TokenManager
from dashboard.adapters.inbound.api.v1.router import api_router as api_v1_router
from dashboard.shared.middleware import (
    AsyncExceptionMiddleware,
    AsyncRequestLoggingMiddleware,
    AsyncSecurityHeadersMiddleware,
    validation_exception_handler,
    http_exception_handler,
)

logger = logging.getLogger(__name__)


def configure_logging(settings: Settings) -> None:
    level = logging.DEBUG if settings.DEBUG else getattr(logging, settings.LOG_LEVEL, logging.INFO)
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )


# ── TOKEN BLACKLIST CLEANUP TASK ──────────────────────────────────────────────
async def cleanup_token_blacklist(database: Database) -> int:
    """Cleans expired tokens from the blacklist in the database."""
    async with database.session() as db:
        deleted = await token_repository.cleanup_expired(db)
    logger.info(f"Cleaned up {deleted} expired tokens from blacklist")
    return deleted


async def periodic_cleanup(database: Database, interval_seconds: int):
    """Background task to periodically clean up expired tokens."""
    while True:
        try:
            await asyncio.sleep(interval_seconds)
            await cleanup_token_blacklist(database)
        except asyncio.CancelledError:
            logger.info("Token cleanup task cancelled")
            break
        except Exception as e:
            logger.exception(f"Error in cleanup_token_blacklist: {e}")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Async context manager to handle startup and shutdown events.
    """
    settings: Settings = app.state.settings
    database: Database = app.state.database

    # Startup
    logger.info("Application starting up...")
    await database.create_all()

    cleanup_task = None
    if settings.BLACKLIST_CLEANUP_INTERVAL_SECONDS > 0:
        cleanup_task = asyncio.create_task(
            periodic_cleanup(database, settings.BLACKLIST_CLEANUP_INTERVAL_SECONDS)
        )

    yield

    # Shutdown
    logger.info("Application shutting down...")
    if cleanup_task is not None:
        cleanup_task.cancel()
        try:
            await cleanup_task
        except asyncio.CancelledError:
            pass
    await database.dispose()


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Build the FastAPI application.

    Settings are read once here and handed to every collaborator that needs
    them; nothing reads configuration from module globals.
    """
    if settings is None:
        settings = Settings()

    configure_logging(settings)

    app = FastAPI(
        title="Announcements Quizzes Dashboard",
        description="Announcements and quizzes API with JWT authentication",
        version="1.0.0",
        debug=settings.DEBUG,
        lifespan=lifespan,
    )

    app.state.settings = settings
    app.state.database = Database(settings)
    app.state.token_manager = TokenManager(settings)
    app.state.password_hasher = PasswordHasher(settings.BCRYPT_ROUNDS)

    # Error pipeline
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)

    # Middlewares (the last one added runs first)
    app.add_middleware(AsyncExceptionMiddleware)
    app.add_middleware(AsyncRequestLoggingMiddleware, environment=settings.ENVIRONMENT)
    app.add_middleware(
        AsyncSecurityHeadersMiddleware,
        enable_hsts=settings.ENVIRONMENT == "production" and settings.USE_HTTPS,
    )

    # Routers
    app.include_router(api_v1_router, prefix="/api/v1")

    @app.get("/", include_in_schema=False)
    async def home():
        return {"message": "Welcome to Announcements Quizzes Dashboard"}

    return app
