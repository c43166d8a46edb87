"""Memory key-value store adapter for counter caches."""

import asyncio
import logging
import time
from collections import OrderedDict
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional

from ..entities.config import ExpiryOptions

logger = logging.getLogger(__name__)


@dataclass
class MemoryStoreEntry:
    """Memory store entry with expiry metadata."""
    value: Any
    created_at: float
    expires_at: Optional[float] = None
    
    def is_expired(self, now: float) -> bool:
        """Check if entry is expired at the given clock reading."""
        return self.expires_at is not None and now >= self.expires_at


class MemoryAdapter:
    """In-process key-value store with TTL support and optional LRU eviction.
    
    Suitable for tests and single-process deployments. Every operation holds
    an ``asyncio.Lock``, which gives the per-key atomicity the counter cache
    relies on within one event loop.
    
    Args:
        max_size: Maximum number of entries, None for unbounded
        clock: Monotonic clock used for expiry, injectable for tests
    """
    
    def __init__(self, max_size: Optional[int] = None, clock: Callable[[], float] = time.monotonic):
        if max_size is not None and max_size <= 0:
            raise ValueError("max_size must be positive")
        
        self.max_size = max_size
        self._clock = clock
        self._store: "OrderedDict[str, MemoryStoreEntry]" = OrderedDict()
        self._lock = asyncio.Lock()
        self._stats = {
            "hits": 0,
            "misses": 0,
            "sets": 0,
            "deletes": 0,
            "evictions": 0,
            "expired": 0,
        }
    
    async def get(self, key: str) -> Optional[Any]:
        """Get value by key, None when absent or expired."""
        async with self._lock:
            entry = self._store.get(key)
            
            if entry is None:
                self._stats["misses"] += 1
                return None
            
            if entry.is_expired(self._clock()):
                del self._store[key]
                self._stats["expired"] += 1
                self._stats["misses"] += 1
                logger.debug(f"Memory store entry expired: {key}")
                return None
            
            # Move to end for LRU tracking
            self._store.move_to_end(key)
            self._stats["hits"] += 1
            return entry.value
    
    async def set(self, key: str, value: Any, options: Optional[ExpiryOptions] = None) -> None:
        """Set value, overwriting any existing entry."""
        now = self._clock()
        ttl = options.ttl_seconds if options else None
        
        async with self._lock:
            self._store.pop(key, None)
            self._store[key] = MemoryStoreEntry(
                value=value,
                created_at=now,
                expires_at=now + ttl if ttl else None,
            )
            self._stats["sets"] += 1
            
            if self.max_size is not None:
                while len(self._store) > self.max_size:
                    evicted_key, _ = self._store.popitem(last=False)
                    self._stats["evictions"] += 1
                    logger.debug(f"Memory store evicted entry: {evicted_key}")
    
    async def delete(self, key: str, options: Optional[ExpiryOptions] = None) -> bool:
        """Delete key and return whether it existed."""
        async with self._lock:
            entry = self._store.pop(key, None)
            if entry is None:
                return False
            self._stats["deletes"] += 1
            return not entry.is_expired(self._clock())
    
    async def exists(self, key: str) -> bool:
        """Check if key exists and is not expired."""
        async with self._lock:
            entry = self._store.get(key)
            return entry is not None and not entry.is_expired(self._clock())
    
    async def ttl(self, key: str) -> Optional[float]:
        """Get remaining TTL in seconds, None if absent or never expiring."""
        async with self._lock:
            entry = self._store.get(key)
            if entry is None or entry.expires_at is None:
                return None
            return max(0.0, entry.expires_at - self._clock())
    
    async def clear(self) -> None:
        """Remove every entry."""
        async with self._lock:
            self._store.clear()
    
    async def size(self) -> int:
        """Get number of live entries."""
        async with self._lock:
            now = self._clock()
            return sum(1 for entry in self._store.values() if not entry.is_expired(now))
    
    async def stats(self) -> Dict[str, Any]:
        """Get store statistics."""
        async with self._lock:
            total_requests = self._stats["hits"] + self._stats["misses"]
            hit_rate = (self._stats["hits"] / total_requests) if total_requests > 0 else 0.0
            return {
                **self._stats,
                "entries": len(self._store),
                "hit_rate": hit_rate,
                "total_requests": total_requests,
            }
