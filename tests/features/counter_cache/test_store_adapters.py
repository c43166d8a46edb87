"""Tests for key-value store adapters."""

from unittest.mock import AsyncMock

import pytest
from redis.exceptions import ConnectionError as RedisConnectionError
from redis.exceptions import ResponseError
from redis.exceptions import TimeoutError as RedisTimeoutError

from neo_counter_cache.core.exceptions import (
    CacheConnectionError,
    CacheError,
    CacheSerializationError,
    CacheTimeoutError,
    StoreUnavailableError,
)
from neo_counter_cache.features.counter_cache.adapters.memory_adapter import MemoryAdapter
from neo_counter_cache.features.counter_cache.adapters.redis_adapter import RedisAdapter, RedisConnectionConfig
from neo_counter_cache.features.counter_cache.entities.config import ExpiryOptions
from neo_counter_cache.features.counter_cache.entities.protocols import KeyValueStore


class TestMemoryAdapter:
    """Test the in-process store."""
    
    def test_satisfies_protocol(self, memory_store):
        assert isinstance(memory_store, KeyValueStore)
    
    def test_rejects_non_positive_max_size(self):
        with pytest.raises(ValueError):
            MemoryAdapter(max_size=0)
    
    @pytest.mark.asyncio
    async def test_set_get_delete(self, memory_store):
        await memory_store.set("k", 5)
        
        assert await memory_store.get("k") == 5
        assert await memory_store.delete("k") is True
        assert await memory_store.delete("k") is False
        assert await memory_store.get("k") is None
    
    @pytest.mark.asyncio
    async def test_set_overwrites(self, memory_store):
        await memory_store.set("k", 5)
        await memory_store.set("k", 6)
        
        assert await memory_store.get("k") == 6
        assert await memory_store.size() == 1
    
    @pytest.mark.asyncio
    async def test_ttl_expiry(self, memory_store, fake_clock):
        await memory_store.set("k", 5, ExpiryOptions.seconds(10))
        
        fake_clock.advance(9)
        assert await memory_store.get("k") == 5
        assert await memory_store.ttl("k") == 1
        
        fake_clock.advance(1)
        assert await memory_store.exists("k") is False
        assert await memory_store.get("k") is None
    
    @pytest.mark.asyncio
    async def test_zero_ttl_never_expires(self, memory_store, fake_clock):
        await memory_store.set("k", 5, ExpiryOptions(ttl_seconds=0))
        
        fake_clock.advance(10_000)
        
        assert await memory_store.get("k") == 5
        assert await memory_store.ttl("k") is None
    
    @pytest.mark.asyncio
    async def test_delete_expired_reports_absent(self, memory_store, fake_clock):
        await memory_store.set("k", 5, ExpiryOptions.seconds(1))
        fake_clock.advance(2)
        
        assert await memory_store.delete("k") is False
    
    @pytest.mark.asyncio
    async def test_lru_eviction(self, fake_clock):
        store = MemoryAdapter(max_size=2, clock=fake_clock)
        await store.set("a", 1)
        await store.set("b", 2)
        await store.get("a")
        
        await store.set("c", 3)
        
        assert await store.get("a") == 1
        assert await store.get("b") is None
        assert await store.get("c") == 3
        assert (await store.stats())["evictions"] == 1
    
    @pytest.mark.asyncio
    async def test_stats(self, memory_store):
        await memory_store.set("k", 1)
        await memory_store.get("k")
        await memory_store.get("missing")
        
        stats = await memory_store.stats()
        
        assert stats["hits"] == 1
        assert stats["misses"] == 1
        assert stats["sets"] == 1
        assert stats["entries"] == 1
        assert stats["hit_rate"] == 0.5
    
    @pytest.mark.asyncio
    async def test_clear(self, memory_store):
        await memory_store.set("a", 1)
        await memory_store.set("b", 2)
        
        await memory_store.clear()
        
        assert await memory_store.size() == 0


@pytest.fixture
def redis_client():
    """Mock redis.asyncio client."""
    client = AsyncMock()
    client.ping = AsyncMock(return_value=True)
    client.get = AsyncMock(return_value=None)
    client.set = AsyncMock(return_value=True)
    client.delete = AsyncMock(return_value=0)
    client.ttl = AsyncMock(return_value=-2)
    return client


@pytest.fixture
def redis_store(redis_client):
    """Redis adapter over the mock client."""
    return RedisAdapter(redis_client=redis_client)


class TestRedisAdapter:
    """Test the Redis store against a mock client."""
    
    def test_connection_kwargs(self):
        kwargs = RedisConnectionConfig(host="cache", port=6380, database=2).to_connection_kwargs()
        
        assert kwargs["host"] == "cache"
        assert kwargs["port"] == 6380
        assert kwargs["db"] == 2
        assert "ssl" not in kwargs
    
    def test_connection_kwargs_ssl(self):
        assert RedisConnectionConfig(ssl=True).to_connection_kwargs()["ssl"] is True
    
    @pytest.mark.asyncio
    async def test_get_decodes_integer(self, redis_store, redis_client):
        redis_client.get.return_value = b"5"
        
        assert await redis_store.get("k") == 5
        redis_client.ping.assert_awaited_once()
        redis_client.get.assert_awaited_once_with("k")
    
    @pytest.mark.asyncio
    async def test_get_miss(self, redis_store):
        assert await redis_store.get("k") is None
    
    @pytest.mark.asyncio
    async def test_get_bad_value(self, redis_store, redis_client):
        redis_client.get.return_value = b"not-a-number"
        
        with pytest.raises(CacheSerializationError):
            await redis_store.get("k")
    
    @pytest.mark.asyncio
    async def test_set_with_ttl(self, redis_store, redis_client):
        await redis_store.set("k", 7, ExpiryOptions.seconds(60))
        
        redis_client.set.assert_awaited_once_with("k", "7", ex=60)
    
    @pytest.mark.asyncio
    async def test_set_without_ttl(self, redis_store, redis_client):
        await redis_store.set("k", 7, ExpiryOptions())
        
        redis_client.set.assert_awaited_once_with("k", "7", ex=None)
    
    @pytest.mark.asyncio
    async def test_key_prefix(self, redis_client):
        store = RedisAdapter(redis_client=redis_client, key_prefix="app:")
        
        await store.set("k", 1)
        
        redis_client.set.assert_awaited_once_with("app:k", "1", ex=None)
    
    @pytest.mark.asyncio
    async def test_delete_reports_existence(self, redis_store, redis_client):
        assert await redis_store.delete("k") is False
        
        redis_client.delete.return_value = 1
        assert await redis_store.delete("k") is True
    
    @pytest.mark.asyncio
    async def test_ttl(self, redis_store, redis_client):
        assert await redis_store.ttl("k") is None
        
        redis_client.ttl.return_value = 42
        assert await redis_store.ttl("k") == 42
    
    @pytest.mark.asyncio
    async def test_connection_error_translated(self, redis_store, redis_client):
        redis_client.get.side_effect = RedisConnectionError("connection refused")
        
        with pytest.raises(CacheConnectionError) as exc_info:
            await redis_store.get("k")
        
        assert isinstance(exc_info.value, StoreUnavailableError)
        assert exc_info.value.details == {"operation": "get", "key": "k"}
    
    @pytest.mark.asyncio
    async def test_timeout_translated(self, redis_store, redis_client):
        redis_client.delete.side_effect = RedisTimeoutError("timed out")
        
        with pytest.raises(CacheTimeoutError):
            await redis_store.delete("k")
    
    @pytest.mark.asyncio
    async def test_other_redis_error_translated(self, redis_store, redis_client):
        redis_client.set.side_effect = ResponseError("WRONGTYPE")
        
        with pytest.raises(CacheError):
            await redis_store.set("k", 1)
    
    @pytest.mark.asyncio
    async def test_connect_failure(self, redis_client):
        redis_client.ping.side_effect = RedisConnectionError("no route")
        store = RedisAdapter(redis_client=redis_client)
        
        with pytest.raises(CacheConnectionError):
            await store.get("k")
    
    @pytest.mark.asyncio
    async def test_health_check(self, redis_store, redis_client):
        assert await redis_store.health_check() is True
        
        redis_client.ping.side_effect = RedisConnectionError("gone")
        assert await RedisAdapter(redis_client=redis_client).health_check() is False
    
    @pytest.mark.asyncio
    async def test_disconnect_keeps_injected_client(self, redis_store, redis_client):
        await redis_store.get("k")
        
        await redis_store.disconnect()
        
        redis_client.aclose.assert_not_called()
        assert redis_store.redis_client is redis_client
