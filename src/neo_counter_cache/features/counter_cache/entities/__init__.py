"""Counter cache entities - value objects, bindings and protocols."""

from .cache_key import CacheKey, CACHE_KEY_PREFIX, KEY_SEPARATOR
from .binding import CounterCacheBinding
from .config import CounterCacheConfig, ExpiryOptions
from .protocols import KeyValueStore, CountQuery, CounterCacheHook

__all__ = [
    "CacheKey",
    "CACHE_KEY_PREFIX",
    "KEY_SEPARATOR",
    "CounterCacheBinding",
    "CounterCacheConfig",
    "ExpiryOptions",
    "KeyValueStore",
    "CountQuery",
    "CounterCacheHook",
]
