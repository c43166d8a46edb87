"""Redis key-value store adapter for counter caches."""

import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

from redis.asyncio import ConnectionPool, Redis
from redis.exceptions import (
    ConnectionError as RedisConnectionError,
    RedisError,
    TimeoutError as RedisTimeoutError,
)

from ..entities.config import ExpiryOptions
from ....core.exceptions import (
    CacheConnectionError,
    CacheError,
    CacheSerializationError,
    CacheTimeoutError,
)

logger = logging.getLogger(__name__)


@dataclass
class RedisConnectionConfig:
    """Connection settings for a Redis-backed store."""
    
    host: str = "localhost"
    port: int = 6379
    database: int = 0
    password: Optional[str] = None
    ssl: bool = False
    max_connections: int = 10
    connection_timeout: int = 5
    command_timeout: int = 3
    health_check_interval: int = 30
    
    def to_connection_kwargs(self) -> Dict[str, Any]:
        """Convert to ``ConnectionPool`` keyword arguments."""
        kwargs = {
            "host": self.host,
            "port": self.port,
            "db": self.database,
            "password": self.password,
            "socket_timeout": self.command_timeout,
            "socket_connect_timeout": self.connection_timeout,
            "health_check_interval": self.health_check_interval,
            "max_connections": self.max_connections,
        }
        
        # Only add ssl if it's True (Redis asyncio doesn't like ssl=False)
        if self.ssl:
            kwargs["ssl"] = self.ssl
        
        return kwargs


def _translate(error: RedisError, operation: str, key: str) -> CacheError:
    """Map a redis-py error onto the store-unavailable hierarchy."""
    details = {"operation": operation, "key": key}
    if isinstance(error, RedisTimeoutError):
        return CacheTimeoutError(f"Redis {operation} timed out for key {key}: {error}", details=details)
    if isinstance(error, RedisConnectionError):
        return CacheConnectionError(f"Redis {operation} connection error for key {key}: {error}", details=details)
    return CacheError(f"Redis {operation} error for key {key}: {error}", details=details)


class RedisAdapter:
    """Redis key-value store for cached counts.
    
    Counts are written as decimal strings and read back as ``int``. Expiry
    uses ``SET ... EX`` so a write and its TTL are one atomic command.
    
    Either pass a ready ``redis_client`` or a ``RedisConnectionConfig`` and
    call ``connect()``.
    """
    
    def __init__(
        self,
        config: Optional[RedisConnectionConfig] = None,
        redis_client: Optional[Redis] = None,
        key_prefix: str = "",
    ):
        self.config = config or RedisConnectionConfig()
        self.redis_client: Optional[Redis] = redis_client
        self.connection_pool: Optional[ConnectionPool] = None
        self.key_prefix = key_prefix
        self._owns_client = redis_client is None
        self._connected = False
    
    async def connect(self) -> None:
        """Connect to Redis and verify the connection."""
        if self._connected:
            return
        
        try:
            if self.redis_client is None:
                self.connection_pool = ConnectionPool(**self.config.to_connection_kwargs())
                self.redis_client = Redis(connection_pool=self.connection_pool)
            
            await self.redis_client.ping()
            self._connected = True
            logger.info(f"Connected to Redis: {self.config.host}:{self.config.port}")
            
        except RedisError as e:
            raise CacheConnectionError(f"Failed to connect to Redis: {e}") from e
    
    async def disconnect(self) -> None:
        """Disconnect from Redis if this adapter created the client."""
        if self.redis_client is None or not self._owns_client:
            return
        
        try:
            await self.redis_client.aclose()
        except RedisError as e:
            logger.error(f"Error closing Redis connection: {e}")
        finally:
            self.redis_client = None
            self.connection_pool = None
            self._connected = False
    
    def _full_key(self, key: str) -> str:
        return f"{self.key_prefix}{key}"
    
    async def _ensure_connected(self) -> Redis:
        if not self._connected:
            await self.connect()
        return self.redis_client
    
    async def get(self, key: str) -> Optional[int]:
        """Get the cached count, None when the key is absent."""
        client = await self._ensure_connected()
        
        try:
            result = await client.get(self._full_key(key))
        except RedisError as e:
            raise _translate(e, "get", key) from e
        
        if result is None:
            return None
        
        if isinstance(result, bytes):
            result = result.decode()
        try:
            return int(result)
        except ValueError as e:
            raise CacheSerializationError(
                f"Cached value for key {key} is not an integer: {result!r}",
                details={"key": key},
            ) from e
    
    async def set(self, key: str, value: Any, options: Optional[ExpiryOptions] = None) -> None:
        """Set the cached count with optional TTL."""
        client = await self._ensure_connected()
        ttl = options.ttl_seconds if options else None
        
        try:
            await client.set(self._full_key(key), str(value), ex=ttl if ttl else None)
        except RedisError as e:
            raise _translate(e, "set", key) from e
    
    async def delete(self, key: str, options: Optional[ExpiryOptions] = None) -> bool:
        """Delete key and return whether it existed."""
        client = await self._ensure_connected()
        
        try:
            result = await client.delete(self._full_key(key))
        except RedisError as e:
            raise _translate(e, "delete", key) from e
        
        return result > 0
    
    async def ttl(self, key: str) -> Optional[int]:
        """Get remaining TTL for key."""
        client = await self._ensure_connected()
        
        try:
            result = await client.ttl(self._full_key(key))
        except RedisError as e:
            raise _translate(e, "ttl", key) from e
        
        # -2: key doesn't exist, -1: key exists without TTL
        return None if result < 0 else result
    
    async def health_check(self) -> bool:
        """Check Redis connectivity."""
        try:
            client = await self._ensure_connected()
            return bool(await client.ping())
        except (RedisError, CacheError) as e:
            logger.warning(f"Redis health check failed: {e}")
            return False
