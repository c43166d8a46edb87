"""Exceptions module for neo-counter-cache.

This module provides the complete exception hierarchy, organized by
domain concerns, database concerns and infrastructure concerns.
"""

from .base import NeoCounterCacheError

from .domain import (
    ConfigurationError,
    InvalidArgumentError,
    InvalidCountError,
)

from .database import (
    DatabaseError,
    QueryError,
    RepositoryError,
    EntityNotFoundError,
    AssociationNotRegisteredError,
)

from .infrastructure import (
    StoreUnavailableError,
    CacheError,
    CacheConnectionError,
    CacheTimeoutError,
    CacheSerializationError,
    DatabaseConnectionError,
)

__all__ = [
    # Base
    "NeoCounterCacheError",
    
    # Domain
    "ConfigurationError",
    "InvalidArgumentError",
    "InvalidCountError",
    
    # Database
    "DatabaseError",
    "QueryError",
    "RepositoryError",
    "EntityNotFoundError",
    "AssociationNotRegisteredError",
    
    # Infrastructure
    "StoreUnavailableError",
    "CacheError",
    "CacheConnectionError",
    "CacheTimeoutError",
    "CacheSerializationError",
    "DatabaseConnectionError",
]
