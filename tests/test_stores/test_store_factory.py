"""Tests for create_store."""

import pytest

from nr_storage import StorageConfigError, StorageSettings
from nr_storage.stores import InMemoryStore, RedisStore, SQLiteStore, create_store


def test_default_is_redis():
    assert isinstance(create_store(StorageSettings()), RedisStore)


def test_memory():
    settings = StorageSettings.model_validate({"store": {"type": "memory"}})
    assert isinstance(create_store(settings), InMemoryStore)


def test_sqlite():
    settings = StorageSettings.model_validate({"store": {"type": "sqlite", "path": ":memory:"}})
    assert isinstance(create_store(settings), SQLiteStore)


def test_sqlite_requires_path():
    settings = StorageSettings.model_validate({"store": {"type": "sqlite"}})
    with pytest.raises(StorageConfigError):
        create_store(settings)
