"""Counter cache store adapters - Redis and in-memory implementations."""

from .memory_adapter import MemoryAdapter
from .redis_adapter import RedisAdapter, RedisConnectionConfig

__all__ = [
    "MemoryAdapter",
    "RedisAdapter",
    "RedisConnectionConfig",
]
