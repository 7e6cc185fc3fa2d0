"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - BoatId wraps int; ids are store-assigned, never client-supplied
    - BoatRecord is immutable; updates produce a new record with the same id
    - All valid backend choices encoded as Enums, no raw string matching

Design Decisions:
    - NewType over wrapper classes: zero runtime cost, full type-checker support
    - str Enums: compare equal to their env-var spelling in settings
"""

from dataclasses import dataclass
from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

BoatId = NewType("BoatId", int)

# signed 64-bit, the widest id column on any supported database
BOAT_ID_MAX = 2**63 - 1


# ─── Records ─────────────────────────────────────────────────────

@dataclass(frozen=True)
class BoatRecord:
    """A persisted Boat as seen by the domain and the HTTP layer."""
    id: BoatId
    name: str
    description: str


# ─── Enums ───────────────────────────────────────────────────────

class StoreBackend(str, Enum):
    """Which BoatRepository implementation backs the API."""
    DATABASE = "database"
    MEMORY = "memory"
