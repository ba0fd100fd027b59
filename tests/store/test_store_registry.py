"""Tests for the store backend registry."""

import os
import tempfile

import pytest

from nodetree.config import Settings
from nodetree.store.memory import InMemoryTreeStore
from nodetree.store.registry import (
    StoreBackendNotFoundError,
    get_backend,
    list_backends,
    open_store,
)
from nodetree.store.sqlite import SqliteTreeStore


class TestStoreRegistry:
    def test_builtin_backends_registered(self):
        assert {"memory", "sqlite"} <= set(list_backends())

    def test_unknown_backend(self):
        with pytest.raises(StoreBackendNotFoundError, match="mongo"):
            get_backend("mongo")

    async def test_open_memory_store(self):
        store = await open_store(Settings(store_backend="memory"))
        assert isinstance(store, InMemoryTreeStore)
        assert store.name == "memory"

    async def test_open_sqlite_store(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = os.path.join(tmpdir, "tree.db")
            store = await open_store(Settings(store_backend="sqlite", db_path=path))
            try:
                assert isinstance(store, SqliteTreeStore)
                assert store.name == "sqlite"
                assert os.path.exists(path)
            finally:
                await store.close()
