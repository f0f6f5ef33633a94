"""Root conftest — shared test configuration and database fixtures.

Invariants:
    - Environment defaults are set before any storefront module reads settings
    - Every test gets a fresh in-memory SQLite database with the full schema

Design Decisions:
    - SQLite in-memory: fast, no external dependency, sufficient for repository
      and route tests (PostgreSQL-specific cascades are not relied upon)
    - Low bcrypt cost in tests: hashing semantics are identical, only slower at 10
"""

import os

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///test.db")
os.environ.setdefault(
    "JWT_SECRET_KEY", "test-secret-key-for-storefront-suite-0123456789",
)
os.environ.setdefault("PASSWORD_HASH_ROUNDS", "4")

import pytest  # noqa: E402
from sqlalchemy.ext.asyncio import (  # noqa: E402
    AsyncSession, create_async_engine, async_sessionmaker,
)

from storefront.db.base import Base  # noqa: E402
import storefront.models  # noqa: E402, F401


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
