"""Custom exceptions for the nr_storage package."""

from __future__ import annotations


class StorageError(Exception):
    """Base exception for all storage errors."""


class StoreError(StorageError):
    """Raised when a document store operation fails."""

    def __init__(self, operation: str, detail: str = "") -> None:
        self.operation = operation
        msg = f"Store error during '{operation}'"
        if detail:
            msg += f": {detail}"
        super().__init__(msg)


class LibraryEntryDecodeError(StorageError):
    """Raised when a stored library value is not a valid ``{meta, body}`` document."""

    def __init__(self, key: str, detail: str = "") -> None:
        self.key = key
        msg = f"Cannot decode library entry at '{key}'"
        if detail:
            msg += f": {detail}"
        super().__init__(msg)


class StorageNotInitializedError(StorageError):
    """Raised when the adapter is used before ``init`` or after ``close``."""

    def __init__(self, operation: str) -> None:
        self.operation = operation
        super().__init__(f"Storage is not initialized (called '{operation}')")


class StorageConfigError(StorageError):
    """Raised when the storage settings are unusable."""
