"""Collaborator factories driven by CounterCacheSettings."""

import logging
from typing import Any, Optional

from ..adapters.memory_adapter import MemoryAdapter
from ..adapters.redis_adapter import RedisAdapter, RedisConnectionConfig
from ..entities.config import CounterCacheConfig, ExpiryOptions
from ..entities.protocols import CountQuery, KeyValueStore
from ..repositories.database_manager import DatabaseManager
from ....config.settings import CounterCacheSettings, StoreBackend, get_settings
from ....core.exceptions import ConfigurationError

logger = logging.getLogger(__name__)


def redis_config_from_settings(settings: CounterCacheSettings) -> RedisConnectionConfig:
    """Build Redis connection settings from global settings."""
    return RedisConnectionConfig(
        host=settings.redis_host,
        port=settings.redis_port,
        database=settings.redis_db,
        password=settings.redis_password.get_secret_value() if settings.redis_password else None,
        ssl=settings.redis_ssl,
        max_connections=settings.redis_max_connections,
        connection_timeout=settings.redis_connection_timeout,
        command_timeout=settings.redis_command_timeout,
    )


def create_store(settings: Optional[CounterCacheSettings] = None) -> KeyValueStore:
    """Create the configured key-value store.
    
    The Redis adapter connects lazily on first use.
    """
    settings = settings or get_settings()
    
    if settings.backend == StoreBackend.MEMORY:
        logger.info("Using in-memory counter cache store")
        return MemoryAdapter(max_size=settings.memory_max_size)
    
    if settings.backend == StoreBackend.REDIS:
        logger.info(f"Using Redis counter cache store at {settings.redis_host}:{settings.redis_port}")
        return RedisAdapter(config=redis_config_from_settings(settings))
    
    raise ConfigurationError(f"Unsupported counter cache backend: {settings.backend}")


def default_expiry_options(settings: Optional[CounterCacheSettings] = None) -> ExpiryOptions:
    """Expiry options from the configured default TTL."""
    settings = settings or get_settings()
    return ExpiryOptions(ttl_seconds=settings.expiry_ttl)


def create_database_manager(settings: Optional[CounterCacheSettings] = None) -> DatabaseManager:
    """Create a DatabaseManager from the configured database URL.
    
    The pool is created lazily on first use.
    
    Raises:
        ConfigurationError: If no database URL is configured
    """
    settings = settings or get_settings()
    
    if not settings.database_url:
        raise ConfigurationError("NEO_COUNTER_CACHE_DATABASE_URL is not set")
    
    return DatabaseManager(
        settings.database_url,
        min_size=settings.database_pool_min_size,
        max_size=settings.database_pool_max_size,
        command_timeout=settings.database_command_timeout,
    )


def counter_cache_config_from_settings(
    count_query: CountQuery,
    settings: Optional[CounterCacheSettings] = None,
    store: Optional[KeyValueStore] = None,
    **overrides: Any,
) -> CounterCacheConfig:
    """Build a CounterCacheConfig from settings.
    
    Pass ``store`` to share one store between bindings; otherwise a new one
    is created. ``overrides`` set the per-binding naming fields.
    """
    settings = settings or get_settings()
    
    return CounterCacheConfig(
        store=store or create_store(settings),
        count_query=count_query,
        expiry_options=default_expiry_options(settings),
        key_prefix=settings.key_prefix,
        **overrides,
    )
