"""Root conftest — shared test configuration and store fixtures.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - `repository` runs each dependent test against both store implementations

Design Decisions:
    - SQLite in-memory: fast, no external dependency, same SQL store code path
    - session_manager wraps the per-test engine, so the fixture owns the
      engine lifecycle rather than the store
"""

import os

# Keep tests independent of a developer's .env / shell
os.environ.setdefault("AUTH_PASSWORD", "hunter2")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")

import pytest  # noqa: E402
from sqlalchemy.ext.asyncio import (  # noqa: E402
    AsyncSession, create_async_engine, async_sessionmaker,
)

from boatyard.db.base import Base  # noqa: E402
from boatyard.infrastructure.boat_repository import SqlBoatRepository  # noqa: E402
from boatyard.infrastructure.database import DatabaseSessionManager  # noqa: E402
from boatyard.infrastructure.memory_store import InMemoryBoatRepository  # noqa: E402
import boatyard.models  # noqa: E402,F401


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
def session_manager(test_engine):
    """DatabaseSessionManager wired to the per-test engine."""
    manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    manager.engine = test_engine
    manager._session_factory = async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )
    return manager


@pytest.fixture(params=["database", "memory"])
def repository(request, session_manager):
    """Each store implementation in turn."""
    if request.param == "database":
        return SqlBoatRepository(session_manager)
    return InMemoryBoatRepository()
