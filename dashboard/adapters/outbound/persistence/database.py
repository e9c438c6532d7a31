# dashboard/adapters/outbound/persistence/database.py

import logging
from typing import AsyncGenerator
from contextlib import asynccontextmanager
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine, async_sessionmaker
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.pool import StaticPool

from dashboard.adapters.configuration.config import Settings
# importing the package registers every table on Base.metadata
from dashboard.adapters.outbound.persistence.models import Base

# Configure logger
logger = logging.getLogger(__name__)


class Database:
    """
    Owns the async engine and session factory for one application instance.
    """

    def __init__(self, settings: Settings):
        self.url = settings.DATABASE_URL
        logger.info(f"Connecting to database: {self.url.split('@')[-1]}")

        engine_kwargs = {"echo": settings.DB_ECHO, "future": True}
        if self.url.startswith("sqlite"):
            engine_kwargs["connect_args"] = {"check_same_thread": False}
            if ":memory:" in self.url or self.url.rstrip("/").endswith("sqlite+aiosqlite:"):
                # a single shared connection keeps the in-memory database alive
                engine_kwargs["poolclass"] = StaticPool
        else:
            engine_kwargs.update(
                pool_size=20,
                max_overflow=10,
                pool_timeout=30,
                pool_recycle=1800,
                pool_pre_ping=True,
            )

        try:
            self.engine = create_async_engine(self.url, **engine_kwargs)
            self.session_factory = async_sessionmaker(
                autocommit=False,
                autoflush=False,
                bind=self.engine,
                expire_on_commit=False,
            )
            logger.info("Async database connection configured successfully")
        except SQLAlchemyError as e:
            logger.error(f"Error connecting to database: {str(e)}")
            raise

    async def create_all(self) -> None:
        """Create database tables if they don't exist."""
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def dispose(self) -> None:
        await self.engine.dispose()

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """
        Provides an async context for database operations,
        ensuring the session is closed at the end.

        Example:
            ```python
            async with database.session() as db:
                result = await db.execute(select(User))
            ```
        """
        session = self.session_factory()
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()
