"""Counter cache registry - the read, populate and invalidate protocol.

One registry serves one (entity type, association) binding. It holds no
locks and starts no background work; per-key atomicity of get, set and
delete is the store's responsibility.

Consistency model:
    A key is either absent or holds the true count as of the last
    recompute. ``invalidate`` is an unconditional delete, so an
    ``invalidate`` that completes before a ``get`` starts forces that
    ``get`` to recompute. A recompute racing an invalidate may write a
    pre-mutation count just before the delete, which only costs one extra
    recompute later.

Errors from the store or the count query are never caught here: a missing
parent, a connection failure or a cancellation reaches the caller as is,
and nothing is cached for it.
"""

import logging
from typing import Any

from ..entities.binding import CounterCacheBinding
from ..entities.cache_key import CACHE_KEY_PREFIX, CacheKey
from ..entities.config import ExpiryOptions
from ..entities.protocols import CountQuery, KeyValueStore
from ..utils.validation import ensure_count, ensure_parent_id

logger = logging.getLogger(__name__)


class CounterCacheRegistry:
    """Cached child count for one parent entity type and association."""
    
    def __init__(
        self,
        binding: CounterCacheBinding,
        store: KeyValueStore,
        count_query: CountQuery,
        expiry_options: ExpiryOptions = None,
        key_prefix: str = CACHE_KEY_PREFIX,
    ):
        self.binding = binding
        self.store = store
        self.count_query = count_query
        self.expiry_options = expiry_options or ExpiryOptions()
        self.key_prefix = key_prefix
    
    def build_key(self, parent_id: Any) -> CacheKey:
        """Derive the cache key for parent_id under this binding."""
        return CacheKey.build(
            self.binding.entity_type,
            self.binding.association_name,
            parent_id,
            prefix=self.key_prefix,
        )
    
    async def get(self, parent_id: Any) -> int:
        """Return the cached count, recomputing it on a miss."""
        ensure_parent_id(parent_id)
        key = str(self.build_key(parent_id))
        
        cached = await self.store.get(key)
        if cached is not None:
            logger.debug(f"Counter cache hit: {key}")
            return int(cached)
        
        logger.debug(f"Counter cache miss: {key}")
        return await self.recompute_and_store(parent_id)
    
    async def recompute_and_store(self, parent_id: Any) -> int:
        """Query the true count and overwrite the cached value with it.
        
        Last writer wins. Concurrent recomputes converge on the count
        observed by the latest query.
        """
        ensure_parent_id(parent_id)
        key = str(self.build_key(parent_id))
        
        count = ensure_count(
            await self.count_query.count(
                self.binding.entity_type,
                self.binding.association_name,
                parent_id,
            ),
            key,
        )
        
        await self.store.set(key, count, self.expiry_options)
        logger.debug(f"Counter cache stored {key} = {count}")
        return count
    
    async def invalidate(self, parent_id: Any) -> None:
        """Delete the cached count. Deleting an absent key is a no-op."""
        ensure_parent_id(parent_id)
        key = str(self.build_key(parent_id))
        
        existed = await self.store.delete(key, self.expiry_options)
        logger.debug(f"Counter cache invalidated {key} (existed={existed})")
    
    async def on_child_mutated(self, parent_id: Any) -> None:
        """Lifecycle hook: a child of parent_id was created or destroyed."""
        await self.invalidate(parent_id)
    
    def __repr__(self) -> str:
        return f"CounterCacheRegistry({self.binding.name})"
