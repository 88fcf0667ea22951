"""
UserBoard Backend — Test Configuration (conftest.py)
======================================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixture Hierarchy (all function-scoped):
    ├── memory_repository: fresh InMemoryUserRepository
    ├── sql_repository: SqlUserRepository on a private in-memory SQLite database
    ├── repository: parametrized over both backends
    ├── sample_user_payload: the "Alice" create payload
    ├── test_client: HTTPX AsyncClient on an app backed by `repository`
    └── app_factory: builds an app + client around any repository
"""

import os

# Override settings for testing BEFORE any userboard imports
os.environ["STORAGE_BACKEND"] = "memory"
os.environ["DATABASE_URL"] = "sqlite+aiosqlite://"
os.environ["LOG_LEVEL"] = "WARNING"  # Reduce noise during tests

from contextlib import asynccontextmanager

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

from userboard.database import build_engine
from userboard.main import create_app
from userboard.repositories import InMemoryUserRepository, SqlUserRepository


@pytest.fixture
def memory_repository():
    return InMemoryUserRepository()


@pytest_asyncio.fixture
async def sql_repository():
    """
    SqlUserRepository with its own in-memory SQLite database.

    Each engine holds a single StaticPool connection, so databases are
    isolated between tests.
    """
    repo = SqlUserRepository(build_engine("sqlite+aiosqlite://"))
    await repo.initialize()
    yield repo
    await repo.close()


@pytest_asyncio.fixture(params=["memory", "sql"])
async def repository(request):
    """Runs the requesting test once per storage backend."""
    if request.param == "memory":
        yield InMemoryUserRepository()
        return

    repo = SqlUserRepository(build_engine("sqlite+aiosqlite://"))
    await repo.initialize()
    yield repo
    await repo.close()


@pytest.fixture
def sample_user_payload():
    return {"name": "Alice", "email": "alice@example.com"}


@pytest.fixture
def app_factory():
    """
    Build an app around a given repository and yield an HTTPX client for it.

    Usage:
        async with app_factory(FailingRepository()) as client:
            response = await client.get("/api/users")
    """

    @asynccontextmanager
    async def _make(repo):
        app = create_app(repository=repo)
        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://test") as client:
            yield client

    return _make


@pytest_asyncio.fixture
async def test_client(app_factory, repository):
    """
    Async HTTP test client for endpoint testing.

    ASGITransport does not run the lifespan; the repository fixtures have
    already initialized storage.
    """
    async with app_factory(repository) as client:
        yield client
