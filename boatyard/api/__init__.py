"""API Layer — FastAPI routes, authentication middleware and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - All endpoints return structured JSON responses

Design Decisions:
    - Thin routes delegate to the Boat store (no logic in handlers)
"""
