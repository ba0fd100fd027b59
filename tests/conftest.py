"""Shared pytest fixtures for nodetree tests."""

import pytest
from httpx import ASGITransport, AsyncClient

from nodetree.db.connection import Database
from nodetree.main import app
from nodetree.store.memory import InMemoryTreeStore
from nodetree.store.sqlite import SqliteTreeStore
from nodetree.trees.router import get_tree_service
from nodetree.trees.service import TreeService


@pytest.fixture
async def db():
    """In-memory database for tests."""
    database = await Database.connect(":memory:")
    yield database
    await database.close()


@pytest.fixture
async def sqlite_store(db):
    """SqliteTreeStore backed by in-memory database."""
    return SqliteTreeStore(db)


@pytest.fixture
async def memory_store():
    return InMemoryTreeStore()


@pytest.fixture(params=["memory", "sqlite"])
async def store(request):
    """Each store backend in turn; contract tests run against both."""
    if request.param == "memory":
        yield InMemoryTreeStore()
        return
    database = await Database.connect(":memory:")
    yield SqliteTreeStore(database)
    await database.close()


@pytest.fixture
async def service(store):
    """TreeService over the parametrized store."""
    return TreeService(store)


@pytest.fixture
async def client(db):
    """Async test client with an in-memory SQLite store wired into the app."""
    service = TreeService(SqliteTreeStore(db))
    app.dependency_overrides[get_tree_service] = lambda: service
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as client:
        yield client
    app.dependency_overrides.clear()
