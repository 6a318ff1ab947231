"""
Tests for the Redis storage, against a mocked async client.
"""

from unittest.mock import AsyncMock

import pytest
from redis.exceptions import ConnectionError as RedisConnectionError

from country_cache.errors import NotFound
from country_cache.repositories import InMemoryStorage, PersistentStorage, RedisStorage


def make_client(**overrides):
    client = AsyncMock()
    client.get.return_value = overrides.get("get")
    client.exists.return_value = overrides.get("exists", 0)
    client.ping.return_value = True
    return client


@pytest.mark.asyncio
async def test_save_sets_value():
    client = make_client()
    storage = RedisStorage.create(redis_client=client)

    await storage.save("k", b"v")

    client.set.assert_awaited_once_with("k", b"v")


@pytest.mark.asyncio
async def test_fetch_returns_value():
    storage = RedisStorage(redis_client=make_client(get=b"payload"))

    assert await storage.fetch("k") == b"payload"


@pytest.mark.asyncio
async def test_fetch_missing_key_is_not_found():
    storage = RedisStorage(redis_client=make_client(get=None))

    with pytest.raises(NotFound, match="k"):
        await storage.fetch("k")


@pytest.mark.asyncio
async def test_remove_deletes_all_keys_at_once():
    client = make_client()
    storage = RedisStorage(redis_client=client)

    await storage.remove("a", "b")
    await storage.remove()

    client.delete.assert_awaited_once_with("a", "b")


@pytest.mark.asyncio
async def test_exists_reflects_count():
    assert await RedisStorage(redis_client=make_client(exists=1)).exists("k")
    assert not await RedisStorage(redis_client=make_client(exists=0)).exists("k")


@pytest.mark.asyncio
async def test_health_check():
    """Ping failures report unhealthy instead of raising."""
    client = make_client()
    storage = RedisStorage(redis_client=client)
    assert await storage.health_check()

    client.ping.side_effect = RedisConnectionError("down")
    assert not await storage.health_check()


@pytest.mark.asyncio
async def test_close_closes_client():
    client = make_client()
    await RedisStorage(redis_client=client).close()
    client.aclose.assert_awaited_once()


@pytest.mark.asyncio
async def test_backends_satisfy_storage_protocol():
    """Both backends expose the full storage contract, health check included."""
    redis_storage = RedisStorage(redis_client=make_client())
    memory_storage = InMemoryStorage()

    assert isinstance(redis_storage, PersistentStorage)
    assert isinstance(memory_storage, PersistentStorage)
    assert await memory_storage.health_check()
