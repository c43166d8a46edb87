"""Counter cache feature for neo-counter-cache.

Feature-First architecture:
- entities/: cache keys, bindings, configuration records and protocols
- services/: the counter cache registry, public handle and lifecycle notifier
- adapters/: Redis and in-memory key-value stores
- repositories/: PostgreSQL-backed association counts
- utils/: naming, validation and SQL templates
"""

from .entities import (
    CacheKey,
    CACHE_KEY_PREFIX,
    CounterCacheBinding,
    CounterCacheConfig,
    ExpiryOptions,
    KeyValueStore,
    CountQuery,
    CounterCacheHook,
)
from .services import (
    CounterCacheRegistry,
    CounterCache,
    BoundCounter,
    create_counter_cache,
    ChildLifecycleNotifier,
    create_store,
    default_expiry_options,
    counter_cache_config_from_settings,
)
from .adapters import MemoryAdapter, RedisAdapter, RedisConnectionConfig
from .repositories import AssociationCountRepository, AssociationMapping, DatabaseManager

__all__ = [
    # Entities
    "CacheKey",
    "CACHE_KEY_PREFIX",
    "CounterCacheBinding",
    "CounterCacheConfig",
    "ExpiryOptions",
    
    # Protocols
    "KeyValueStore",
    "CountQuery",
    "CounterCacheHook",
    
    # Services
    "CounterCacheRegistry",
    "CounterCache",
    "BoundCounter",
    "create_counter_cache",
    "ChildLifecycleNotifier",
    "create_store",
    "default_expiry_options",
    "counter_cache_config_from_settings",
    
    # Adapters
    "MemoryAdapter",
    "RedisAdapter",
    "RedisConnectionConfig",
    
    # Repositories
    "AssociationCountRepository",
    "AssociationMapping",
    "DatabaseManager",
]
