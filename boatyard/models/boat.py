"""Boat ORM — persists the single Boat resource.

Invariants:
    - id is an integer primary key assigned by the database, never reused
    - name and description are non-nullable text (non-blank enforced in core.boat_rules)

Design Decisions:
    - BigInteger on server databases, INTEGER on SQLite: only SQLite's
      INTEGER PRIMARY KEY is a rowid alias that autoincrements
    - sqlite_autoincrement=True: without AUTOINCREMENT SQLite hands the id of
      a deleted newest row to the next insert
"""

from sqlalchemy import BigInteger, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from boatyard.core.domain_types import BoatId, BoatRecord
from boatyard.db.base import Base


class Boat(Base):
    """A boat with a name and a description."""
    __tablename__ = "boats"
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(
        BigInteger().with_variant(Integer, "sqlite"),
        primary_key=True, autoincrement=True,
    )
    name: Mapped[str] = mapped_column(Text, nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)

    def to_record(self) -> BoatRecord:
        return BoatRecord(
            id=BoatId(self.id), name=self.name, description=self.description,
        )
