"""Pydantic Schemas — request/response shapes for API endpoints.

Invariants:
    - Schemas parse JSON at the system boundary; field rules live in core/validate_airport.py
    - Wire names are the camelCase Portuguese names (nome, codigoIata, ...)

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
"""
