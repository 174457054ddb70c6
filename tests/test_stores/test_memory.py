"""Tests for InMemoryStore."""

import pytest

from nr_storage.stores import InMemoryStore


@pytest.fixture
def store():
    return InMemoryStore()


async def test_get_nonexistent(store):
    assert await store.get("k") is None


async def test_set_and_get(store):
    await store.set("k", b"v")
    assert await store.get("k") == b"v"


async def test_overwrite(store):
    await store.set("k", b"1")
    await store.set("k", b"2")
    assert await store.get("k") == b"2"


async def test_keys_by_prefix(store):
    await store.set("nr:lib:t:a", b"")
    await store.set("nr:lib:t:b/c", b"")
    await store.set("nr:lib:u:a", b"")
    await store.set("nr:flows", b"")
    assert await store.keys("nr:lib:t:") == ["nr:lib:t:a", "nr:lib:t:b/c"]


async def test_keys_keep_insertion_order(store):
    for key in ["p:z", "p:a", "p:m"]:
        await store.set(key, b"")
    await store.set("p:a", b"again")
    assert await store.keys("p:") == ["p:z", "p:a", "p:m"]


async def test_keys_empty(store):
    assert await store.keys("nothing:") == []


async def test_empty_prefix_matches_everything(store):
    await store.set("a", b"")
    await store.set("b", b"")
    assert await store.keys("") == ["a", "b"]


async def test_prefix_is_literal(store):
    await store.set("t:*x", b"")
    await store.set("t:ax", b"")
    assert await store.keys("t:*") == ["t:*x"]


async def test_connect_and_close_are_noops(store):
    await store.connect()
    await store.set("k", b"v")
    await store.close()
    assert await store.get("k") == b"v"
