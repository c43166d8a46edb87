"""Counter cache binding entity.

ONLY binding metadata - the immutable association between a parent entity
type, an association name and the names derived from them.
"""

from dataclasses import dataclass
from typing import Optional

from ..utils.naming import default_foreign_key, default_owner_table
from ..utils.validation import validate_name


@dataclass(frozen=True)
class CounterCacheBinding:
    """Binding of a parent entity type and association to a counter cache.
    
    Created once at configuration time; one binding per
    (entity type, association name) pair.
    
    Attributes:
        entity_type: Parent entity type name, e.g. ``"Tweet"``
        association_name: One-to-many association, e.g. ``"favorites"``
        counter_method_name: Accessor name, default ``"<association>_count"``
        clear_method_name: Invalidation accessor, ``"clear_<counter>"``
        foreign_key: Child field referencing the parent, e.g. ``"tweet_id"``
        owner_table: Parent table name the foreign key is derived from
    """
    
    entity_type: str
    association_name: str
    counter_method_name: str
    clear_method_name: str
    foreign_key: str
    owner_table: str
    
    @classmethod
    def create(
        cls,
        entity_type: str,
        association_name: str,
        owner_table: Optional[str] = None,
        counter_method_name: Optional[str] = None,
        foreign_key: Optional[str] = None,
    ) -> "CounterCacheBinding":
        """Create a binding, filling in conventional defaults."""
        validate_name(entity_type, "entity_type")
        validate_name(association_name, "association_name")
        
        owner_table = owner_table or default_owner_table(entity_type)
        counter_method_name = counter_method_name or f"{association_name}_count"
        
        return cls(
            entity_type=entity_type,
            association_name=association_name,
            counter_method_name=counter_method_name,
            clear_method_name=f"clear_{counter_method_name}",
            foreign_key=foreign_key or default_foreign_key(owner_table),
            owner_table=owner_table,
        )
    
    @property
    def name(self) -> str:
        """Human-readable binding name for logs."""
        return f"{self.entity_type}.{self.association_name}"
