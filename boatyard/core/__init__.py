"""Core Layer — pure domain logic, no IO, no DB.

Invariants:
    - No module in core/ imports from api/, infrastructure/, or db/
    - All functions are pure and deterministic (principal password generation aside)

Design Decisions:
    - Functional core separated from imperative shell: routes and stores
      call into core, never the reverse
"""
