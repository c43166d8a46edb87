"""Cache key value object for counter caches.

ONLY key derivation - immutable key built from binding metadata and the
runtime parent identifier, nothing else.
"""

from dataclasses import dataclass
from typing import Any, Tuple

CACHE_KEY_PREFIX = "volatile-counter-cache"
KEY_SEPARATOR = "/"


def escape_component(value: Any) -> str:
    """Escape a key component so it can never contain the separator.
    
    ``%`` is escaped first so that escaped output cannot be confused with
    a literal ``%2F`` in the input.
    """
    return str(value).replace("%", "%25").replace(KEY_SEPARATOR, "%2F")


@dataclass(frozen=True)
class CacheKey:
    """Cache key for one parent's cached count.
    
    The mapping (entity type, association name, parent id) -> key is
    deterministic and injective over the rendered components: they are
    escaped before joining, so ``("a/b", "c")`` and ``("a", "b/c")`` produce
    different keys. ``parent_id`` is rendered through ``str()``, so ids that
    render alike, such as ``1`` and ``"1"``, share a key.
    
    Example:
        >>> str(CacheKey.build("Tweet", "favorites", 42))
        'volatile-counter-cache/Tweet/favorites/42'
    """
    
    entity_type: str
    association_name: str
    parent_id: str
    prefix: str = CACHE_KEY_PREFIX
    
    @classmethod
    def build(cls, entity_type: str, association_name: str, parent_id: Any, prefix: str = CACHE_KEY_PREFIX) -> "CacheKey":
        """Create a key, normalizing parent_id through ``str()``."""
        return cls(
            entity_type=entity_type,
            association_name=association_name,
            parent_id=str(parent_id),
            prefix=prefix,
        )
    
    def get_parts(self) -> Tuple[str, str, str, str]:
        """Get the unescaped key components."""
        return (self.prefix, self.entity_type, self.association_name, self.parent_id)
    
    def namespace(self) -> str:
        """Key prefix shared by every parent of the same binding."""
        return KEY_SEPARATOR.join(escape_component(part) for part in self.get_parts()[:3])
    
    def to_string(self) -> str:
        """Get string representation."""
        return KEY_SEPARATOR.join(escape_component(part) for part in self.get_parts())
    
    def __str__(self) -> str:
        return self.to_string()
