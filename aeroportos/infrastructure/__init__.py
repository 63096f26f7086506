"""Infrastructure Layer — database access, repositories and cross-cutting concerns.

Invariants:
    - Infrastructure never holds domain rules (those live in core/)
    - SQLAlchemy exceptions never escape as-is: mapped to core/errors.py types

Design Decisions:
    - Repositories implement core Protocols structurally (no base class)
"""
