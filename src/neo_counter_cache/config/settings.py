"""Settings for neo-counter-cache.

Environment-driven configuration for the cache backend, default expiry
and database connectivity. Variables use the ``NEO_COUNTER_CACHE_`` prefix,
for example ``NEO_COUNTER_CACHE_BACKEND=redis``.
"""

from enum import Enum
from functools import lru_cache
from typing import Optional

from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class StoreBackend(str, Enum):
    """Supported key-value store backends."""
    MEMORY = "memory"
    REDIS = "redis"


class CounterCacheSettings(BaseSettings):
    """Global counter cache settings."""
    
    model_config = SettingsConfigDict(
        env_prefix="NEO_COUNTER_CACHE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )
    
    # Store selection
    backend: StoreBackend = Field(default=StoreBackend.MEMORY, description="Key-value store backend")
    default_ttl_seconds: int = Field(default=0, ge=0, description="Default expiry for cached counts, 0 disables expiry")
    key_prefix: str = Field(default="volatile-counter-cache", min_length=1, description="Namespace prepended to every cache key")
    
    # Redis configuration
    redis_host: str = Field(default="localhost", description="Redis host")
    redis_port: int = Field(default=6379, ge=1, le=65535, description="Redis port")
    redis_db: int = Field(default=0, ge=0, le=15, description="Redis database number")
    redis_password: Optional[SecretStr] = Field(default=None, description="Redis password")
    redis_ssl: bool = Field(default=False, description="Use SSL for Redis")
    redis_max_connections: int = Field(default=10, ge=1, description="Max Redis connections")
    redis_connection_timeout: int = Field(default=5, ge=1, description="Redis connection timeout")
    redis_command_timeout: int = Field(default=3, ge=1, description="Redis command timeout")
    
    # Memory store configuration
    memory_max_size: Optional[int] = Field(default=None, ge=1, description="Max memory store entries")
    
    # Database configuration
    database_url: Optional[str] = Field(default=None, description="asyncpg DSN for count queries")
    database_pool_min_size: int = Field(default=1, ge=0, description="Minimum database pool size")
    database_pool_max_size: int = Field(default=10, ge=1, description="Maximum database pool size")
    database_command_timeout: float = Field(default=30.0, gt=0, description="Database command timeout")
    
    @field_validator("database_url")
    @classmethod
    def strip_driver_suffix(cls, v: Optional[str]) -> Optional[str]:
        """Accept SQLAlchemy-style ``postgresql+asyncpg://`` URLs."""
        if v and "+asyncpg" in v:
            return v.replace("+asyncpg", "")
        return v
    
    @property
    def expiry_ttl(self) -> Optional[int]:
        """Default TTL as passed to stores, None when expiry is disabled."""
        return self.default_ttl_seconds or None


@lru_cache()
def get_settings() -> CounterCacheSettings:
    """Get cached settings instance."""
    return CounterCacheSettings()
