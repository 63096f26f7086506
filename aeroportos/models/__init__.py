"""ORM Models — SQLAlchemy declarative models.

Invariants:
    - All models inherit from Base (db/base.py)
    - Airport is the only entity; no relationships

Design Decisions:
    - Models imported here so alembic and test fixtures populate Base.metadata
      with a single import
"""

from aeroportos.models.airport import Airport  # noqa: F401
