"""
Pytest configuration and shared fixtures.

This module provides:
- Environment variable setup for tests
- In-memory database sessions
- HTTP clients wired to the SQL or in-memory employee store
"""

import os

import pytest


# Set test environment variables BEFORE any imports
# This must happen first to ensure settings load with test values
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["DB_CREATE_ALL"] = "true"
os.environ["LOG_LEVEL"] = "WARNING"
os.environ["LOG_JSON"] = "false"


@pytest.fixture
def anyio_backend():
    """
    Configure anyio backend for async tests.

    Returns:
        str: Backend name ("asyncio")
    """
    return "asyncio"


@pytest.fixture
async def async_session():
    """
    Create an in-memory SQLite database session for testing.

    Each test gets a fresh engine, so no rows leak between tests.

    Yields:
        AsyncSession for testing
    """
    from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine, async_sessionmaker
    from sqlalchemy.pool import StaticPool

    from employee_api.models import Base

    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    session_maker = async_sessionmaker(
        engine, class_=AsyncSession, expire_on_commit=False
    )

    async with session_maker() as session:
        yield session

    await engine.dispose()


@pytest.fixture
async def client(async_session):
    """
    Create async HTTP client backed by the SQL employee store.

    Overrides get_db so the app uses the test session.

    Yields:
        AsyncClient for making requests
    """
    from httpx import AsyncClient, ASGITransport

    from employee_api.main import app
    from employee_api.core.database import get_db

    async def override_get_db():
        yield async_session

    app.dependency_overrides[get_db] = override_get_db

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client

    app.dependency_overrides.clear()


@pytest.fixture
def memory_store():
    """Fresh in-memory employee store."""
    from employee_api.repositories.memory import InMemoryEmployeeStore

    return InMemoryEmployeeStore()


@pytest.fixture
async def memory_client(memory_store):
    """
    Create async HTTP client backed by the in-memory employee store.

    Yields:
        AsyncClient for making requests
    """
    from httpx import AsyncClient, ASGITransport

    from employee_api.main import app
    from employee_api.api.dependencies import get_employee_store

    app.dependency_overrides[get_employee_store] = lambda: memory_store

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client

    app.dependency_overrides.clear()
