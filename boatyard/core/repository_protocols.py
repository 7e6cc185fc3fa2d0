"""Boundary Protocols — contracts between the HTTP shell and the Boat store.

Invariants:
    - Routes depend on BoatRepository only, never on a concrete store
    - Every method is a single-step unit of work
    - close() releases only resources the store itself owns
    - Failures are reported with core.errors types (BoatValidationError,
      ResourceNotFoundError, DatabaseError), never backend-specific exceptions

Design Decisions:
    - Protocol over ABC: structural subtyping, SQL and in-memory stores share
      no base class
    - Async in Protocol: implementations may do IO
"""

from typing import Protocol

from boatyard.core.domain_types import BoatId, BoatRecord


class BoatRepository(Protocol):
    """Contract for Boat persistence, implemented by infrastructure."""
    async def create(self, name: str, description: str) -> BoatRecord: ...
    async def get(self, boat_id: BoatId) -> BoatRecord: ...
    async def list(self) -> list[BoatRecord]: ...
    async def update(
        self, boat_id: BoatId, name: str, description: str,
    ) -> BoatRecord: ...
    async def delete(self, boat_id: BoatId) -> None: ...
    async def health_check(self) -> bool: ...
    async def close(self) -> None: ...
