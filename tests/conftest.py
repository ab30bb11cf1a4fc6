"""Test configuration and fixtures for the product catalog."""

from collections.abc import AsyncGenerator, Generator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.ext.asyncio import AsyncSession

from src.config import Settings
from src.infrastructure.database import (
    close_database,
    create_tables,
    get_session_context,
    init_database,
)
from src.main import create_app

# In-memory SQLite shared through a single pooled connection
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest.fixture
def settings() -> Settings:
    return Settings(
        _env_file=None,
        database_url=TEST_DATABASE_URL,
        environment="development",
    )


@pytest.fixture
def app(settings: Settings):
    return create_app(settings)


@pytest.fixture(name="client")
def client_fixture(app) -> Generator[TestClient, None, None]:
    """Create a test client with the lifespan (database setup) running."""
    with TestClient(app) as client:
        yield client


@pytest.fixture
async def session() -> AsyncGenerator[AsyncSession, None]:
    """Session on a fresh in-memory database, outside of any request."""
    init_database(TEST_DATABASE_URL)
    await create_tables()
    try:
        async with get_session_context() as session:
            yield session
    finally:
        await close_database()
