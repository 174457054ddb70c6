"""Document store backends for flat key-value persistence."""

from nr_storage.stores.base import DocumentStore
from nr_storage.stores.factory import create_store
from nr_storage.stores.memory import InMemoryStore
from nr_storage.stores.redis_store import RedisStore
from nr_storage.stores.sqlite import SQLiteStore

__all__ = ["DocumentStore", "InMemoryStore", "RedisStore", "SQLiteStore", "create_store"]
