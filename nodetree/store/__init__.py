"""Tree stores: the storage interface and its interchangeable backends."""

from nodetree.store.base import TreeStore
from nodetree.store.memory import InMemoryTreeStore
from nodetree.store.registry import open_store
from nodetree.store.sqlite import SqliteTreeStore

__all__ = ["InMemoryTreeStore", "SqliteTreeStore", "TreeStore", "open_store"]
