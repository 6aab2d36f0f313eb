"""Integration test fixtures for database and HTTP client operations.

Tests run against a file-backed SQLite database (aiosqlite). Tables are
created from model metadata for every test, so each test starts empty.
Uses polyfactory for type-safe test data generation.
"""

from collections.abc import AsyncGenerator

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession
from sqlmodel import SQLModel

from src.cobrew.core import db
from src.cobrew.main import create_app
from src.cobrew.models import Message, Profile, Project, ProjectApplication, User  # noqa: F401


@pytest.fixture(scope="function")
async def engine() -> AsyncGenerator[AsyncEngine]:
    """Shared app engine with a freshly created schema."""
    await db.dispose_engine()
    test_engine = db.get_engine()

    async with test_engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)
        await conn.run_sync(SQLModel.metadata.create_all)

    yield test_engine

    async with test_engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)
    await db.dispose_engine()


@pytest.fixture
async def db_session(engine: AsyncEngine) -> AsyncGenerator[AsyncSession]:
    """Provide an async session for arranging test data.

    The session does NOT auto-commit; helpers in tests.helpers commit
    explicitly so the app's own sessions can see the rows.
    """
    async with AsyncSession(engine, expire_on_commit=False) as session:
        yield session


@pytest.fixture
async def client(engine: AsyncEngine) -> AsyncGenerator[AsyncClient]:
    """HTTP client against a fresh app instance."""
    app = create_app()
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as client:
        yield client
