"""Build a document store from :class:`~nr_storage.config.StorageSettings`."""

from __future__ import annotations

from nr_storage.config import StorageSettings
from nr_storage.exceptions import StorageConfigError
from nr_storage.stores.base import DocumentStore
from nr_storage.stores.memory import InMemoryStore
from nr_storage.stores.redis_store import RedisStore
from nr_storage.stores.sqlite import SQLiteStore


def create_store(settings: StorageSettings) -> DocumentStore:
    """Create the backend selected by ``settings.store.type``.

    Raises:
        StorageConfigError: sqlite was selected without a ``path``.
    """
    config = settings.store
    if config.type == "sqlite":
        if not config.path:
            raise StorageConfigError("SQLite store requires 'path' configuration")
        return SQLiteStore(config.path)
    if config.type == "memory":
        return InMemoryStore()
    return RedisStore(settings.redis)
