"""DocumentStore protocol — flat byte-level key-value persistence."""

from __future__ import annotations

from abc import ABC, abstractmethod


class DocumentStore(ABC):
    """Abstract base for all document store backends.

    Keys are flat strings.  Values are opaque bytes.  Any hierarchy is the
    caller's business; the store only enumerates keys by prefix.
    Backend failures are raised as :class:`~nr_storage.exceptions.StoreError`.
    """

    async def connect(self) -> None:
        """Open the backend connection.  Calling it again is a no-op."""

    async def close(self) -> None:
        """Release the backend connection.  Safe to call repeatedly."""

    @abstractmethod
    async def get(self, key: str) -> bytes | None:
        """Return the stored value, or ``None`` if not found."""
        ...

    @abstractmethod
    async def set(self, key: str, value: bytes) -> None:
        """Create or overwrite a value."""
        ...

    @abstractmethod
    async def keys(self, prefix: str) -> list[str]:
        """Return every key starting with *prefix*, in backend order."""
        ...
