"""Dependency Wiring — builds the Boat store at startup and hands it to routes.

Invariants:
    - Exactly one BoatRepository per app, stored on app.state.boat_repository
    - The store owns its session manager; nothing else holds the engine
    - Routes obtain it through get_boat_repository, never by importing a store

Design Decisions:
    - Store chosen from settings.store_backend: SQL (default) or in-memory
    - Schema created at startup for embedded databases when enabled;
      server databases are migrated with alembic
"""

import logging

from fastapi import Request

from boatyard.config import Settings
from boatyard.core.domain_types import StoreBackend
from boatyard.core.repository_protocols import BoatRepository
from boatyard.infrastructure.boat_repository import SqlBoatRepository
from boatyard.infrastructure.database import DatabaseSessionManager
from boatyard.infrastructure.memory_store import InMemoryBoatRepository

logger = logging.getLogger(__name__)


async def build_boat_repository(settings: Settings) -> BoatRepository:
    """Create the configured store. Called once from the app lifespan."""
    if settings.store_backend == StoreBackend.MEMORY:
        logger.info("Using in-memory boat store")
        return InMemoryBoatRepository()

    manager = DatabaseSessionManager(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    if settings.database_create_schema:
        await manager.create_schema()
    logger.info("Using database boat store")
    return SqlBoatRepository(manager)


def get_boat_repository(request: Request) -> BoatRepository:
    """FastAPI dependency for the Boat store."""
    repository = getattr(request.app.state, "boat_repository", None)
    if repository is None:
        raise RuntimeError("Boat store not initialized")
    return repository
