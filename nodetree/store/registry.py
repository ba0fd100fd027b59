"""Store backend registry: maps backend names to async store factories."""

from collections.abc import Awaitable, Callable

from nodetree.config import Settings
from nodetree.store.base import TreeStore
from nodetree.store.memory import InMemoryTreeStore
from nodetree.store.sqlite import SqliteTreeStore

StoreFactory = Callable[[Settings], Awaitable[TreeStore]]

_backends: dict[str, StoreFactory] = {}


def register_backend(name: str, factory: StoreFactory) -> None:
    """Register a store factory by backend name."""
    _backends[name] = factory


def get_backend(name: str) -> StoreFactory:
    """Get a registered factory by name. Raises StoreBackendNotFoundError if not found."""
    try:
        return _backends[name]
    except KeyError:
        available = ", ".join(_backends.keys()) or "(none)"
        raise StoreBackendNotFoundError(
            f"Store backend '{name}' not registered. Available: {available}"
        )


def list_backends() -> list[str]:
    """Return names of all registered backends."""
    return list(_backends.keys())


async def open_store(settings: Settings) -> TreeStore:
    """Build the store selected by settings.store_backend."""
    return await get_backend(settings.store_backend)(settings)


class StoreBackendNotFoundError(Exception):
    pass


async def _open_memory(settings: Settings) -> TreeStore:
    return InMemoryTreeStore()


async def _open_sqlite(settings: Settings) -> TreeStore:
    return await SqliteTreeStore.open(settings.db_path)


register_backend("memory", _open_memory)
register_backend("sqlite", _open_sqlite)
