"""Counter cache handle and factory.

``create_counter_cache`` builds a binding and its registry from an explicit
configuration and returns a ``CounterCache`` with fixed method names.
Configurable accessor names are exposed through ``accessors()`` instead of
being attached to an entity class.

Example:
    favorites = create_counter_cache(
        "Tweet", "favorites",
        CounterCacheConfig(store=MemoryAdapter(), count_query=repository),
    )
    await favorites.count(tweet_id)
    await favorites.clear_count(tweet_id)
"""

import logging
from typing import Any, Awaitable, Callable, Dict, Mapping

from ..entities.binding import CounterCacheBinding
from ..entities.cache_key import CACHE_KEY_PREFIX
from ..entities.config import CounterCacheConfig
from ..utils.validation import ensure_parent_id
from .counter_cache_registry import CounterCacheRegistry

logger = logging.getLogger(__name__)


class BoundCounter:
    """Counter accessors bound to one parent instance."""
    
    def __init__(self, counter_cache: "CounterCache", parent_id: Any):
        self._counter_cache = counter_cache
        self.parent_id = parent_id
    
    async def count(self) -> int:
        """Cached child count of the bound parent."""
        return await self._counter_cache.count(self.parent_id)
    
    async def clear(self) -> None:
        """Invalidate the bound parent's cached count."""
        await self._counter_cache.clear_count(self.parent_id)


class CounterCache:
    """Public counter cache API for one binding."""
    
    def __init__(self, registry: CounterCacheRegistry, id_attribute: str = "id"):
        self.registry = registry
        self.id_attribute = id_attribute
    
    @property
    def binding(self) -> CounterCacheBinding:
        return self.registry.binding
    
    async def count(self, parent_id: Any) -> int:
        """Get the child count for parent_id."""
        return await self.registry.get(parent_id)
    
    async def clear_count(self, parent_id: Any = None) -> None:
        """Invalidate the cached count for parent_id.
        
        Raises:
            InvalidArgumentError: If parent_id is None or omitted; the store
                is not touched
        """
        ensure_parent_id(parent_id)
        await self.registry.invalidate(parent_id)
    
    async def on_child_mutated(self, parent_id: Any) -> None:
        """Lifecycle hook, see ``CounterCacheRegistry.on_child_mutated``."""
        await self.registry.on_child_mutated(parent_id)
    
    def parent_id_of(self, parent: Any) -> Any:
        """Read the identifier of a parent object or mapping."""
        if isinstance(parent, Mapping):
            return parent.get(self.id_attribute)
        return getattr(parent, self.id_attribute, None)
    
    def for_parent(self, parent: Any) -> BoundCounter:
        """Bind the accessors to a parent object or mapping."""
        return BoundCounter(self, self.parent_id_of(parent))
    
    def accessors(self) -> Dict[str, Callable[..., Awaitable[Any]]]:
        """Accessors keyed by the binding's configured method names."""
        return {
            self.binding.counter_method_name: self.count,
            self.binding.clear_method_name: self.clear_count,
        }
    
    def __repr__(self) -> str:
        return f"CounterCache({self.binding.name})"


def create_counter_cache(
    entity_type: str,
    association_name: str,
    config: CounterCacheConfig,
    id_attribute: str = "id",
) -> CounterCache:
    """Create a counter cache for an entity type and association.
    
    Args:
        entity_type: Parent entity type name, e.g. ``"Tweet"``
        association_name: One-to-many association name, e.g. ``"favorites"``
        config: Store, count query and naming options for this binding
        id_attribute: Attribute or key holding a parent's identifier
        
    Returns:
        CounterCache handle
    """
    binding = CounterCacheBinding.create(
        entity_type,
        association_name,
        owner_table=config.owner_table,
        counter_method_name=config.counter_method_name,
        foreign_key=config.foreign_key,
    )
    registry = CounterCacheRegistry(
        binding=binding,
        store=config.store,
        count_query=config.count_query,
        expiry_options=config.expiry_options,
        key_prefix=config.key_prefix or CACHE_KEY_PREFIX,
    )
    
    logger.debug(
        f"Created counter cache {binding.name} "
        f"(accessor={binding.counter_method_name}, foreign_key={binding.foreign_key})"
    )
    return CounterCache(registry, id_attribute=id_attribute)
