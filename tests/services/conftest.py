"""Service test fixtures — async DB + FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - get_db dependency overridden to use test DB session
    - db_manager replaced so the readiness probe sees the test engine

Design Decisions:
    - SQLite in-memory with StaticPool: every session shares the one connection,
      so data written through the client is visible to test_db
    - Lifespan is not run by ASGITransport: no real database is ever touched
"""

import pytest
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.pool import StaticPool
from httpx import ASGITransport, AsyncClient

from aeroportos.db.base import Base
from aeroportos.db.session import create_schema, create_session_factory
from aeroportos.infrastructure.airport_repository import SqlAlchemyAirportRepository
from aeroportos.infrastructure.database import get_db, DatabaseSessionManager
from aeroportos.models.airport import Airport
from aeroportos.services.airport_service import AirportService
import aeroportos.infrastructure.database as db_module
from aeroportos.main import app


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False, poolclass=StaticPool,
    )
    await create_schema(engine)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return create_session_factory(test_engine)


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
def service(test_db) -> AirportService:
    return AirportService(SqlAlchemyAirportRepository(test_db))


@pytest.fixture
async def client(test_engine, test_session_factory):
    """FastAPI test client with DB dependency overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    original_manager = db_module.db_manager
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    db_module.db_manager = fake_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager


@pytest.fixture
async def seed_airports(test_db):
    """Insert Guarulhos and Congonhas directly into the test DB."""
    airports = [
        Airport(
            name="Aeroporto Internacional de São Paulo/Guarulhos",
            iata_code="GRU", city="São Paulo", country_code="BR",
            latitude=-23.4356, longitude=-46.4731, altitude=750.0,
        ),
        Airport(
            name="Aeroporto de Congonhas",
            iata_code="CGH", city="São Paulo", country_code="BR",
            latitude=-23.6261, longitude=-46.6564, altitude=802.0,
        ),
    ]
    test_db.add_all(airports)
    await test_db.commit()
    for airport in airports:
        await test_db.refresh(airport)
    return airports
