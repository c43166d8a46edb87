"""Counter cache services - registry, handle, lifecycle notifier and store factory."""

from .counter_cache_registry import CounterCacheRegistry
from .counter_cache import CounterCache, BoundCounter, create_counter_cache
from .lifecycle_notifier import ChildLifecycleNotifier, Subscription
from .store_factory import (
    create_store,
    default_expiry_options,
    redis_config_from_settings,
    create_database_manager,
    counter_cache_config_from_settings,
)

__all__ = [
    "CounterCacheRegistry",
    "CounterCache",
    "BoundCounter",
    "create_counter_cache",
    "ChildLifecycleNotifier",
    "Subscription",
    "create_store",
    "default_expiry_options",
    "redis_config_from_settings",
    "create_database_manager",
    "counter_cache_config_from_settings",
]
