"""nr_storage — flow, credential and library persistence on a key-value store.

Library content is a virtual ``type/path/to/entry`` hierarchy kept in a flat
key space.  Directory listings are synthesized from key prefixes.
"""

from nr_storage.config import RedisConfig, StorageSettings, StoreConfig
from nr_storage.exceptions import (
    LibraryEntryDecodeError,
    StorageConfigError,
    StorageError,
    StorageNotInitializedError,
    StoreError,
)
from nr_storage.library import LibraryEntry, LibraryFile, SubDirectory
from nr_storage.storage import NodeRedStorage

__all__ = [
    "LibraryEntry",
    "LibraryEntryDecodeError",
    "LibraryFile",
    "NodeRedStorage",
    "RedisConfig",
    "StorageConfigError",
    "StorageError",
    "StorageNotInitializedError",
    "StorageSettings",
    "StoreConfig",
    "StoreError",
    "SubDirectory",
]
