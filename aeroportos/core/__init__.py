"""Core Layer — pure domain logic, no IO, no DB.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, models/ or db/
    - All functions are pure and deterministic (merge_airport mutates only its argument)

Design Decisions:
    - Functional core separated from imperative shell (ADR: impureim sandwich)
"""
