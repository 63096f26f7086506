"""API Layer — FastAPI routes, error mapping and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - All endpoints return structured JSON responses (except 204 deletes)

Design Decisions:
    - Thin routes delegate to services (ADR: impureim sandwich)
    - HTTP status codes decided here, never in core/ or services/
"""
