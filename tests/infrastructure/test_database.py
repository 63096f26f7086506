"""Database Session Manager — error mapping and health check on SQLite."""

import pytest
from sqlalchemy import text

from aeroportos.core.errors import DatabaseError, DuplicateRecordError
from aeroportos.infrastructure.database import DatabaseSessionManager


@pytest.fixture
async def manager():
    manager = DatabaseSessionManager("sqlite+aiosqlite:///:memory:")
    yield manager
    await manager.dispose()


async def test_health_check_true_on_reachable_db(manager):
    assert await manager.health_check() is True


async def test_sqlalchemy_errors_mapped_to_database_error(manager):
    with pytest.raises(DatabaseError) as exc:
        async with manager.session() as db:
            await db.execute(text("SELECT * FROM missing_table"))
    assert exc.value.http_status == 503
    assert exc.value.operation == "execute"


async def test_integrity_error_mapped_to_commit_failure(manager):
    with pytest.raises(DatabaseError) as exc:
        async with manager.session() as db:
            await db.execute(text("CREATE TABLE t (x INTEGER NOT NULL)"))
            await db.execute(text("INSERT INTO t (x) VALUES (NULL)"))
    assert exc.value.operation == "commit"


async def test_mapped_errors_pass_through_unchanged(manager):
    with pytest.raises(DuplicateRecordError):
        async with manager.session():
            raise DuplicateRecordError("GRU")
