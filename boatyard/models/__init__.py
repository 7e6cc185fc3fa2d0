"""ORM Models — SQLAlchemy declarative models.

Design Decisions:
    - All models imported here so Base.metadata is populated before
      create_all() or alembic autogenerate runs
"""

from boatyard.models.boat import Boat  # noqa: F401
