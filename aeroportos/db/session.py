"""Async Session Factory — async DB sessions and schema setup outside FastAPI.

Invariants:
    - Meant for scripts and test fixtures (the API uses infrastructure/database.py)
    - Sessions keep attributes loaded after commit, like DatabaseSessionManager

Design Decisions:
    - Takes an engine instead of a URL: callers own the engine and its pool
      (tests pass an in-memory SQLite engine on a StaticPool)
"""

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from aeroportos.db.base import Base
import aeroportos.models  # noqa: F401


def create_session_factory(
    engine: AsyncEngine,
) -> async_sessionmaker[AsyncSession]:
    """Create an async session factory bound to engine."""
    return async_sessionmaker(
        engine, class_=AsyncSession, expire_on_commit=False,
    )


async def create_schema(engine: AsyncEngine) -> None:
    """Create all tables (tests and local SQLite only — production uses alembic)."""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
