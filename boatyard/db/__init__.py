"""Database Infrastructure — SQLAlchemy declarative Base.

Invariants:
    - One async engine per app, owned by the SqlBoatRepository built at startup
"""
