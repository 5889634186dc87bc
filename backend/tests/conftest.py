"""Root conftest - shared test configuration and fixtures.

Invariants:
    - No test reaches the real geocoding API (fake key, stub resolver)
    - Every SQL test gets a fresh in-memory SQLite schema from Base.metadata
"""

import os

import pytest

# Ensure tests don't accidentally use real API keys or slow hashing
os.environ.setdefault("GEOCODING_API_KEY", "test-fake-geocoding-key")
os.environ.setdefault("STORAGE_BACKEND", "memory")
os.environ.setdefault("PASSWORD_HASH_ITERATIONS", "1000")

from sqlalchemy.ext.asyncio import (  # noqa: E402
    AsyncSession, async_sessionmaker, create_async_engine,
)

import placeshare.models  # noqa: E402,F401
from placeshare.db.base import Base  # noqa: E402
from placeshare.infrastructure.memory_repository import (  # noqa: E402
    InMemoryPlaceRepository, InMemoryUserRepository,
)
from tests.fakes import StubResolver  # noqa: E402


@pytest.fixture
def resolver():
    """Resolver stub returning the Empire State Building coordinates."""
    return StubResolver()


@pytest.fixture
def place_repo():
    return InMemoryPlaceRepository()


@pytest.fixture
def user_repo():
    return InMemoryUserRepository()


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session
