"""Infrastructure Layer — persistence backends and cross-cutting concerns.

Invariants:
    - Store implementations satisfy core.repository_protocols.BoatRepository
    - All SQLAlchemy failures mapped to DatabaseError
"""
