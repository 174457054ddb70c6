"""InMemoryStore — zero-config, dict-backed storage for development and testing."""

from __future__ import annotations

from nr_storage.stores.base import DocumentStore


class InMemoryStore(DocumentStore):
    """In-memory store.  Keys enumerate in insertion order.  Data is lost on process exit."""

    def __init__(self) -> None:
        self._data: dict[str, bytes] = {}

    async def get(self, key: str) -> bytes | None:
        return self._data.get(key)

    async def set(self, key: str, value: bytes) -> None:
        self._data[key] = value

    async def keys(self, prefix: str) -> list[str]:
        return [key for key in self._data if key.startswith(prefix)]
