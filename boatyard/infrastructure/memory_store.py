"""In-Memory Boat Store — BoatRepository for development and tests.

Invariants:
    - Ids come from a monotonic counter starting at 1, never reused (reset() aside)
    - One asyncio.Lock serializes create/update/delete
    - Records are immutable BoatRecords; update replaces the dict entry

Design Decisions:
    - dict keeps insertion order, so list() returns boats by ascending id
    - State lost on restart, acceptable for a single-process dev server
"""

import asyncio
import itertools
import logging

from boatyard.core.boat_rules import check_boat_fields
from boatyard.core.domain_types import BoatId, BoatRecord
from boatyard.core.errors import ResourceNotFoundError

logger = logging.getLogger(__name__)


class InMemoryBoatRepository:
    """Simple in-memory Boat store."""

    def __init__(self):
        self.boats: dict[BoatId, BoatRecord] = {}
        self._ids = itertools.count(1)
        self._lock = asyncio.Lock()

    async def create(self, name: str, description: str) -> BoatRecord:
        check_boat_fields(name, description)
        async with self._lock:
            record = BoatRecord(
                id=BoatId(next(self._ids)), name=name, description=description,
            )
            self.boats[record.id] = record
        logger.info("Boat created", extra={"boat_id": record.id})
        return record

    async def get(self, boat_id: BoatId) -> BoatRecord:
        record = self.boats.get(boat_id)
        if record is None:
            raise ResourceNotFoundError("Boat", str(boat_id))
        return record

    async def list(self) -> list[BoatRecord]:
        return list(self.boats.values())

    async def update(
        self, boat_id: BoatId, name: str, description: str,
    ) -> BoatRecord:
        check_boat_fields(name, description)
        async with self._lock:
            if boat_id not in self.boats:
                raise ResourceNotFoundError("Boat", str(boat_id))
            record = BoatRecord(id=boat_id, name=name, description=description)
            self.boats[boat_id] = record
        logger.info("Boat updated", extra={"boat_id": boat_id})
        return record

    async def delete(self, boat_id: BoatId) -> None:
        async with self._lock:
            if self.boats.pop(boat_id, None) is None:
                raise ResourceNotFoundError("Boat", str(boat_id))
        logger.info("Boat deleted", extra={"boat_id": boat_id})

    async def health_check(self) -> bool:
        return True

    async def close(self) -> None:
        pass

    def reset(self) -> None:
        """Clear all stored boats and restart ids at 1 (useful in tests)."""
        self.boats.clear()
        self._ids = itertools.count(1)
