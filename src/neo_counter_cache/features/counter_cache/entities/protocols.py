"""Counter cache protocols for neo-counter-cache.

This module defines the interfaces of the external collaborators the
counter cache engine depends on. Concrete implementations live in
``adapters/`` (key-value stores) and ``repositories/`` (count queries).
"""

from abc import abstractmethod
from typing import Any, Optional, Protocol, runtime_checkable

from .config import ExpiryOptions


@runtime_checkable
class KeyValueStore(Protocol):
    """Minimal key-value capability used to hold cached counts.
    
    Each operation must be atomic for a single key. Expiry and eviction are
    the store's own business; an evicted key simply reads as absent.
    """
    
    @abstractmethod
    async def get(self, key: str) -> Optional[Any]:
        """Return the stored value, or None when the key is absent or expired."""
        ...
    
    @abstractmethod
    async def set(self, key: str, value: Any, options: Optional[ExpiryOptions] = None) -> None:
        """Store value under key, overwriting any previous value."""
        ...
    
    @abstractmethod
    async def delete(self, key: str, options: Optional[ExpiryOptions] = None) -> bool:
        """Delete key.
        
        Returns True if the key existed. Deleting an absent key is not an error.
        """
        ...


@runtime_checkable
class CountQuery(Protocol):
    """Authoritative child count for a parent under a named association."""
    
    @abstractmethod
    async def count(self, entity_type: str, association_name: str, parent_id: Any) -> int:
        """Count children referencing parent_id.
        
        Raises:
            EntityNotFoundError: If the parent does not exist
        """
        ...


@runtime_checkable
class CounterCacheHook(Protocol):
    """The single hook a child lifecycle source calls on the counter cache."""
    
    @abstractmethod
    async def on_child_mutated(self, parent_id: Any) -> None:
        """Signal that a child of parent_id was created or destroyed."""
        ...
