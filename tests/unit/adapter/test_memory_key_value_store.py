import asyncio

import pytest

from src.adapter.services.memory_key_value_store import InMemoryKeyValueStore


@pytest.mark.asyncio
async def test_set_get_delete():
    store = InMemoryKeyValueStore()

    await store.set("k", "v", 60)
    assert await store.get("k") == "v"

    assert await store.delete("k") is True
    assert await store.get("k") is None
    assert await store.delete("k") is False


@pytest.mark.asyncio
async def test_entries_expire():
    now = [1000.0]
    store = InMemoryKeyValueStore(clock=lambda: now[0])

    await store.set("k", "v", 10)
    now[0] += 9
    assert await store.get("k") == "v"

    now[0] += 2
    assert await store.get("k") is None
    assert await store.take("k") is None


@pytest.mark.asyncio
async def test_concurrent_take_yields_value_once():
    store = InMemoryKeyValueStore()
    await store.set("token", "42", 60)

    results = await asyncio.gather(*(store.take("token") for _ in range(5)))

    assert results.count("42") == 1
    assert results.count(None) == 4
