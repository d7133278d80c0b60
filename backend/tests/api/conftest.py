"""API test fixtures — async SQLite store + FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - get_db dependency overridden to use the test engine
    - broken_client points at an engine with no tables, so every store call faults

Design Decisions:
    - SQLite in-memory: fast, no external dependency, sufficient for route tests
    - Lifespan not run by ASGITransport: app.state.db_manager set explicitly where needed
"""

import pytest
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from sqlalchemy.pool import StaticPool
from httpx import ASGITransport, AsyncClient

from calculator_service.db.base import Base
from calculator_service.infrastructure.database import get_db
from calculator_service.main import app
import calculator_service.models  # noqa: F401


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False, poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


def _override_get_db(session_factory):
    async def override_get_db():
        async with session_factory() as session:
            yield session
    return override_get_db


@pytest.fixture
async def client(test_session_factory):
    """FastAPI test client with the store dependency overridden."""
    app.dependency_overrides[get_db] = _override_get_db(test_session_factory)
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
async def broken_client():
    """Client whose store has no users table — every store call fails."""
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False, poolclass=StaticPool,
    )
    factory = async_sessionmaker(
        engine, class_=AsyncSession, expire_on_commit=False,
    )
    app.dependency_overrides[get_db] = _override_get_db(factory)
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c
    app.dependency_overrides.clear()
    await engine.dispose()
