"""
Contact Book Backend — Test Configuration (conftest.py)
=========================================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixture Hierarchy:
    Function-scoped (created fresh for each test):
    ├── mock_db_session: Mock database session (no real DB needed)
    ├── sample_contact_data: Field values for a stored contact
    ├── contacts_table: Creates address_contact in the SQLite test database
    └── test_client: HTTPX AsyncClient bound to the FastAPI app
"""

import os
import tempfile
from unittest.mock import AsyncMock, MagicMock

# Override settings BEFORE any app imports: the engine is built at import time
# from whatever URL the settings resolve to.
_test_dir = tempfile.mkdtemp(prefix="contactbook_test_")
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{_test_dir}/test.db"
os.environ["LOG_LEVEL"] = "WARNING"  # Reduce noise during tests

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from httpx import AsyncClient, ASGITransport  # noqa: E402


@pytest.fixture
def mock_db_session():
    """
    Provides a mock async database session.

    Usage:
        async def test_get(mock_db_session):
            mock_db_session.execute.return_value.scalar_one_or_none.return_value = row
            result = await contact_service.get_by_id(mock_db_session, 1)
    """
    session = AsyncMock()
    session.execute = AsyncMock()
    session.flush = AsyncMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    session.close = AsyncMock()
    session.add = MagicMock()
    return session


@pytest.fixture
def sample_contact_data():
    """Field values matching one row of address_contact."""
    return {
        "id": 42,
        "name": "Ada Lovelace",
        "address": "12 St James's Square, London",
        "email": "ada@example.com",
    }


@pytest_asyncio.fixture
async def contacts_table():
    """
    Creates the address_contact table in the SQLite test database.

    The production app never creates its table; tests build it from the ORM
    metadata and drop it afterwards. The engine is disposed on teardown so
    pooled connections never outlive the test's event loop.
    """
    from app.database import Base, engine
    from app.models.contact import Contact  # noqa: F401  registers the table

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture
async def test_client(contacts_table):
    """
    Provides an async HTTP test client for endpoint testing.

    Usage:
        async def test_list(test_client):
            response = await test_client.get("/api/v1/contacts")
            assert response.status_code == 200
    """
    from app.main import app
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
