"""SQL Boat Store — BoatRepository backed by an async SQLAlchemy session per operation.

Invariants:
    - Field rules checked before any statement is issued (blank boats never reach the DB)
    - update/delete are single UPDATE/DELETE statements; rowcount 0 means not found
    - Concurrent updates of the same id: last write wins
    - Concurrent deletes of the same id: exactly one succeeds
    - Ids outside 1..BOAT_ID_MAX are not found without touching the database
      (drivers reject integers wider than the id column)

Design Decisions:
    - Holds the session manager, not a session: the store is built once at
      startup and shared by all requests, each call is its own unit of work
"""

import logging

from sqlalchemy import delete, select, update

from boatyard.core.boat_rules import check_boat_fields
from boatyard.core.domain_types import BOAT_ID_MAX, BoatId, BoatRecord
from boatyard.core.errors import ResourceNotFoundError
from boatyard.infrastructure.database import DatabaseSessionManager
from boatyard.models.boat import Boat as BoatModel

logger = logging.getLogger(__name__)


def _require_storable_id(boat_id: BoatId) -> None:
    if not 0 < boat_id <= BOAT_ID_MAX:
        raise ResourceNotFoundError("Boat", str(boat_id))


class SqlBoatRepository:
    """Boat persistence over DatabaseSessionManager."""

    def __init__(self, manager: DatabaseSessionManager):
        self._manager = manager

    async def create(self, name: str, description: str) -> BoatRecord:
        check_boat_fields(name, description)
        async with self._manager.session() as db:
            boat = BoatModel(name=name, description=description)
            db.add(boat)
            await db.commit()
            logger.info("Boat created", extra={"boat_id": boat.id})
            return boat.to_record()

    async def get(self, boat_id: BoatId) -> BoatRecord:
        _require_storable_id(boat_id)
        async with self._manager.session() as db:
            boat = await db.get(BoatModel, boat_id)
            if boat is None:
                raise ResourceNotFoundError("Boat", str(boat_id))
            return boat.to_record()

    async def list(self) -> list[BoatRecord]:
        async with self._manager.session() as db:
            result = await db.execute(select(BoatModel).order_by(BoatModel.id))
            return [boat.to_record() for boat in result.scalars().all()]

    async def update(
        self, boat_id: BoatId, name: str, description: str,
    ) -> BoatRecord:
        check_boat_fields(name, description)
        _require_storable_id(boat_id)
        async with self._manager.session() as db:
            result = await db.execute(
                update(BoatModel)
                .where(BoatModel.id == boat_id)
                .values(name=name, description=description)
                .execution_options(synchronize_session=False),
            )
            if result.rowcount == 0:
                await db.rollback()
                raise ResourceNotFoundError("Boat", str(boat_id))
            await db.commit()
        logger.info("Boat updated", extra={"boat_id": boat_id})
        return BoatRecord(id=boat_id, name=name, description=description)

    async def delete(self, boat_id: BoatId) -> None:
        _require_storable_id(boat_id)
        async with self._manager.session() as db:
            result = await db.execute(
                delete(BoatModel)
                .where(BoatModel.id == boat_id)
                .execution_options(synchronize_session=False),
            )
            if result.rowcount == 0:
                await db.rollback()
                raise ResourceNotFoundError("Boat", str(boat_id))
            await db.commit()
        logger.info("Boat deleted", extra={"boat_id": boat_id})

    async def health_check(self) -> bool:
        return await self._manager.health_check()

    async def close(self) -> None:
        await self._manager.dispose()
