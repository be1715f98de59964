"""Service test fixtures — in-memory Roster, async SQLite DB, FastAPI test client.

Invariants:
    - Every test gets a fresh InMemoryRoster and a fresh in-memory SQLite database
    - get_db dependency overridden to use the test DB session factory
    - db_manager patched so the readiness probe sees the test engine

Design Decisions:
    - RuleEngine tests run against InMemoryRoster: pure rule behavior, no SQL
    - SQLite in-memory for SqlRoster and route tests: fast, no external dependency
      (row locks are a no-op there; PostgreSQL-specific behavior not exercised)
"""

import pytest
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from httpx import ASGITransport, AsyncClient

from workforce.db.base import Base
from workforce.infrastructure.database import get_db, DatabaseSessionManager
from workforce.infrastructure.sql_roster import SqlRoster
import workforce.infrastructure.database as db_module
import workforce.models  # noqa: F401
from workforce.main import app
from workforce.services.rule_engine import RuleEngine

from tests.services.fake_roster import InMemoryRoster


@pytest.fixture
def roster():
    return InMemoryRoster()


@pytest.fixture
def engine(roster):
    return RuleEngine(roster)


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
def sql_roster(test_db):
    return SqlRoster(test_db)


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

