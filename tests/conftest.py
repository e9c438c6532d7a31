"""
tests/conftest.py -- Shared fixtures for the dashboard test suite.

This module provides:
  - make_settings(): Settings for an isolated in-memory SQLite database
  - client: TestClient running the full app (lifespan included)
  - db_session: AsyncSession on a fresh in-memory database for repository tests

bcrypt runs with the minimum work factor (4) so the suite stays fast.
"""

from __future__ import annotations

from collections.abc import Generator

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient

from dashboard.adapters.configuration.config import Settings
from dashboard.adapters.outbound.persistence.database import Database
from dashboard.main import create_app

TEST_SECRET_KEY = "test-secret-key-that-is-long-enough-for-hs256"


def make_settings(**overrides) -> Settings:
    values = {
        "SECRET_KEY": TEST_SECRET_KEY,
        "DATABASE_URL": "sqlite+aiosqlite:///:memory:",
        "BCRYPT_ROUNDS": 4,
        "ACCESS_TOKEN_EXPIRE_MINUTES": 30,
        "BLACKLIST_CLEANUP_INTERVAL_SECONDS": 0,
        "ENVIRONMENT": "testing",
        "TOKEN_HEADER": "accesstoken",
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


@pytest.fixture
def settings() -> Settings:
    return make_settings()


@pytest.fixture
def app(settings: Settings):
    return create_app(settings)


@pytest.fixture
def client(app) -> Generator[TestClient, None, None]:
    """TestClient against a fresh app and database."""
    with TestClient(app) as test_client:
        yield test_client


@pytest_asyncio.fixture
async def db_session(settings: Settings):
    """AsyncSession on a fresh in-memory database with all tables created."""
    database = Database(settings)
    await database.create_all()
    async with database.session() as session:
        yield session
    await database.dispose()
