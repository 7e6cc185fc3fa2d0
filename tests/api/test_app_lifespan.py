"""App lifespan — store construction and generated-password logging.

Invariants:
    - store_backend=memory builds an InMemoryBoatRepository on startup
    - store_backend=database builds a SqlBoatRepository with its schema created
    - No configured password → a generated one is logged once at WARNING
    - Shutdown closes the store this app built and no other
"""

import logging

import pytest

from boatyard.config import Settings
from boatyard.infrastructure.boat_repository import SqlBoatRepository
from boatyard.infrastructure.memory_store import InMemoryBoatRepository
from boatyard.main import create_app


@pytest.fixture(autouse=True)
def _restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


async def test_memory_backend_built_on_startup():
    app = create_app(Settings(
        _env_file=None, auth_password="hunter2", store_backend="memory",
    ))
    async with app.router.lifespan_context(app):
        assert isinstance(app.state.boat_repository, InMemoryBoatRepository)


async def test_database_backend_creates_schema():
    app = create_app(Settings(
        _env_file=None, auth_password="hunter2",
        database_url="sqlite+aiosqlite:///:memory:",
    ))
    async with app.router.lifespan_context(app):
        repository = app.state.boat_repository
        assert isinstance(repository, SqlBoatRepository)
        boat = await repository.create("Titanic", "Ocean liner")
        assert boat.id == 1


async def test_generated_password_logged(caplog):
    app = create_app(Settings(
        _env_file=None, auth_password=None, store_backend="memory",
    ))
    with caplog.at_level(logging.WARNING, logger="boatyard.main"):
        async with app.router.lifespan_context(app):
            pass
    assert any(
        "Using generated security password" in r.getMessage() for r in caplog.records
    )


async def test_shutdown_closes_own_store(monkeypatch):
    closed = []

    async def record_close(self):
        closed.append(self)

    monkeypatch.setattr(InMemoryBoatRepository, "close", record_close)
    app = create_app(Settings(
        _env_file=None, auth_password="hunter2", store_backend="memory",
    ))
    async with app.router.lifespan_context(app):
        repository = app.state.boat_repository
    assert closed == [repository]


async def test_shutdown_leaves_other_apps_database_open():
    settings = Settings(
        _env_file=None, auth_password="hunter2",
        database_url="sqlite+aiosqlite:///:memory:",
    )
    first, second = create_app(settings), create_app(settings)
    first_lifespan = first.router.lifespan_context(first)
    await first_lifespan.__aenter__()
    async with second.router.lifespan_context(second):
        await first_lifespan.__aexit__(None, None, None)
        # an in-memory database vanishes with its engine, taking the table along
        boat = await second.state.boat_repository.create("Titanic", "Ocean liner")
        assert boat.id == 1
