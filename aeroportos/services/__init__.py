"""Services Layer — orchestrates core rules around repository IO.

Invariants:
    - Services return Result values; domain failures are never raised
    - Repositories are injected at construction (no global store)

Design Decisions:
    - Imperative shell around the pure core (ADR: impureim sandwich)
"""
