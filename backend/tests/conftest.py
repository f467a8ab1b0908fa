"""Shared test configuration and fixtures.

Every test gets a fresh in-memory SQLite database (aiosqlite + StaticPool),
so no external database server is needed and tests are fully isolated.
"""

from collections.abc import AsyncGenerator

import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, create_async_engine
from sqlalchemy.pool import StaticPool

from scripts.seed_data import seed_villas
from villa_api.database import Base, get_db
from villa_api.main import app
from villa_api.models.villa import Villa

TEST_DATABASE_URL = "sqlite+aiosqlite://"


# ---------------------------------------------------------------------------
# Per-test: fresh schema on a private in-memory database
# ---------------------------------------------------------------------------


@pytest_asyncio.fixture
async def test_engine() -> AsyncGenerator[AsyncEngine, None]:
    engine = create_async_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(test_engine: AsyncEngine) -> AsyncGenerator[AsyncSession, None]:
    """Yield a session on the test engine; nothing is committed."""
    session = AsyncSession(bind=test_engine, expire_on_commit=False)
    try:
        yield session
    finally:
        await session.rollback()
        await session.close()


@pytest_asyncio.fixture
async def client(db_session: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """Provide an httpx AsyncClient wired to use the test DB session."""

    async def override_get_db() -> AsyncGenerator[AsyncSession, None]:
        yield db_session

    app.dependency_overrides[get_db] = override_get_db

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as ac:
        yield ac

    app.dependency_overrides.clear()


# ---------------------------------------------------------------------------
# Convenience fixtures: seed data and villa helpers
# ---------------------------------------------------------------------------


@pytest_asyncio.fixture
async def seeded_villas(db_session: AsyncSession) -> list[Villa]:
    """Insert the two starter villas (ids 1 and 2)."""
    return await seed_villas(db_session)


@pytest_asyncio.fixture
async def test_villa(client: AsyncClient) -> dict:
    """Create and return a villa via the API."""
    response = await client.post(
        "/villa",
        json={
            "name": "Casa del Sol",
            "description": "Beachfront villa with a private pool.",
            "image_url": "https://example.com/casa-del-sol.jpg",
            "occupancy": 6,
            "rate": 320.5,
            "area_sqm": 180,
            "amenities": "pool, wifi, kitchen",
        },
    )
    assert response.status_code == 201, f"Failed to create test villa: {response.text}"
    return response.json()
