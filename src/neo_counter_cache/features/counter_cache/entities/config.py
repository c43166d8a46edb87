"""Counter cache configuration records."""

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Mapping, Optional

if TYPE_CHECKING:
    from .protocols import CountQuery, KeyValueStore


@dataclass(frozen=True)
class ExpiryOptions:
    """Expiry policy handed to the key-value store untouched.
    
    ``ttl_seconds`` of None or 0 means the entry does not expire. ``extra``
    carries store-specific options that the counter cache never inspects.
    """
    
    ttl_seconds: Optional[int] = None
    extra: Mapping[str, Any] = field(default_factory=dict)
    
    def __post_init__(self):
        if self.ttl_seconds is not None and self.ttl_seconds < 0:
            raise ValueError("ttl_seconds cannot be negative")
    
    @property
    def expires(self) -> bool:
        """Check if entries written with these options expire."""
        return bool(self.ttl_seconds)
    
    @classmethod
    def never_expire(cls) -> "ExpiryOptions":
        """Create options for entries that never expire."""
        return cls()
    
    @classmethod
    def seconds(cls, ttl_seconds: int, **extra: Any) -> "ExpiryOptions":
        """Create options with a TTL in seconds."""
        return cls(ttl_seconds=ttl_seconds, extra=dict(extra))


@dataclass
class CounterCacheConfig:
    """Configuration for one counter cache binding.
    
    Passed explicitly per binding so every counter cache names its own store;
    there is no ambient global cache.
    """
    
    store: "KeyValueStore"
    count_query: "CountQuery"
    expiry_options: ExpiryOptions = field(default_factory=ExpiryOptions)
    counter_method_name: Optional[str] = None
    foreign_key: Optional[str] = None
    owner_table: Optional[str] = None
    key_prefix: Optional[str] = None
