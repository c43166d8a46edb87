"""Infrastructure-specific exceptions for neo-counter-cache.

This module defines exceptions raised when an external collaborator (the
key-value store or the database) cannot serve a request.
"""

from .base import NeoCounterCacheError


class StoreUnavailableError(NeoCounterCacheError):
    """Base class for collaborator availability failures."""
    pass


# Cache Errors
class CacheError(StoreUnavailableError):
    """Base class for cache-related errors."""
    pass


class CacheConnectionError(CacheError):
    """Raised when cache connection fails."""
    pass


class CacheTimeoutError(CacheError):
    """Raised when cache operation times out."""
    pass


class CacheSerializationError(CacheError):
    """Raised when a cached value cannot be decoded."""
    pass


# Database Errors
class DatabaseConnectionError(StoreUnavailableError):
    """Raised when the database cannot be reached."""
    pass
