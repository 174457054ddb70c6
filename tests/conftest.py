"""Shared test fixtures."""

import pytest

from nr_storage import NodeRedStorage
from nr_storage.exceptions import StoreError
from nr_storage.stores import InMemoryStore


class FailingStore(InMemoryStore):
    """In-memory store whose operations can be made to fail on demand."""

    def __init__(self) -> None:
        super().__init__()
        self.fail_get = False
        self.fail_set = False

    async def get(self, key):
        if self.fail_get:
            raise StoreError("get", "connection refused")
        return await super().get(key)

    async def set(self, key, value):
        if self.fail_set:
            raise StoreError("set", "connection refused")
        await super().set(key, value)


@pytest.fixture
def store():
    return FailingStore()


@pytest.fixture
async def storage(store):
    s = NodeRedStorage(store=store)
    await s.init({"store": {"type": "memory"}})
    yield s
    await s.close()
