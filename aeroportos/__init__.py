"""Aeroportos — CRUD HTTP API for airport records keyed by IATA code.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)

Design Decisions:
    - Empty __init__.py: explicit imports only, no star exports
"""
