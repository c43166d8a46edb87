"""neo-counter-cache: cached child counts for one-to-many associations.

Keeps a per-parent count of associated child records in a key-value store,
recomputing it from the database on a miss and invalidating it whenever a
child is created or destroyed.
"""

from .__version__ import __version__

from .core.exceptions import (
    NeoCounterCacheError,
    InvalidArgumentError,
    InvalidCountError,
    EntityNotFoundError,
    StoreUnavailableError,
)
from .features.counter_cache import (
    CacheKey,
    CounterCacheBinding,
    CounterCacheConfig,
    ExpiryOptions,
    CounterCacheRegistry,
    CounterCache,
    create_counter_cache,
    ChildLifecycleNotifier,
    MemoryAdapter,
    RedisAdapter,
    AssociationCountRepository,
    AssociationMapping,
)

__all__ = [
    "__version__",
    "NeoCounterCacheError",
    "InvalidArgumentError",
    "InvalidCountError",
    "EntityNotFoundError",
    "StoreUnavailableError",
    "CacheKey",
    "CounterCacheBinding",
    "CounterCacheConfig",
    "ExpiryOptions",
    "CounterCacheRegistry",
    "CounterCache",
    "create_counter_cache",
    "ChildLifecycleNotifier",
    "MemoryAdapter",
    "RedisAdapter",
    "AssociationCountRepository",
    "AssociationMapping",
]
