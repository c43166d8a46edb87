"""Association count repository backed by PostgreSQL.

Implements the ``CountQuery`` protocol: the authoritative child count for
a parent under a registered association, read straight from the database.
"""

import asyncio
import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional, Protocol, Tuple

import asyncpg

from ..utils.queries import CHILD_COUNT, PARENT_EXISTS, qualified_table
from ..utils.validation import validate_sql_identifier
from ....core.exceptions import (
    AssociationNotRegisteredError,
    DatabaseConnectionError,
    EntityNotFoundError,
    QueryError,
)

logger = logging.getLogger(__name__)


class ValueFetcher(Protocol):
    """Anything exposing asyncpg's ``fetchval`` (pool, connection, DatabaseManager)."""
    
    async def fetchval(self, query: str, *args: Any) -> Any:
        ...


@dataclass(frozen=True)
class AssociationMapping:
    """Table mapping for one (entity type, association) pair."""
    
    parent_table: str
    child_table: str
    foreign_key: str
    parent_key: str = "id"
    schema: Optional[str] = None
    
    def __post_init__(self):
        validate_sql_identifier(self.parent_table, "parent_table")
        validate_sql_identifier(self.child_table, "child_table")
        validate_sql_identifier(self.foreign_key, "foreign_key")
        validate_sql_identifier(self.parent_key, "parent_key")
        if self.schema is not None:
            validate_sql_identifier(self.schema, "schema")
    
    @property
    def parent_exists_query(self) -> str:
        return PARENT_EXISTS.format(
            table=qualified_table(self.parent_table, self.schema),
            parent_key=self.parent_key,
        )
    
    @property
    def child_count_query(self) -> str:
        return CHILD_COUNT.format(
            table=qualified_table(self.child_table, self.schema),
            foreign_key=self.foreign_key,
        )


class AssociationCountRepository:
    """Count children of a parent through registered table mappings.
    
    The parent is looked up first so that a missing parent raises
    ``EntityNotFoundError`` instead of counting zero children.
    """
    
    def __init__(self, database: ValueFetcher):
        """Initialize with a database handle.
        
        Args:
            database: DatabaseManager, asyncpg pool or connection
        """
        self._db = database
        self._mappings: Dict[Tuple[str, str], AssociationMapping] = {}
    
    def register(self, entity_type: str, association_name: str, mapping: AssociationMapping) -> None:
        """Register the table mapping for an association."""
        self._mappings[(entity_type, association_name)] = mapping
        logger.debug(
            f"Registered association {entity_type}.{association_name} -> "
            f"{mapping.child_table}.{mapping.foreign_key}"
        )
    
    def get_mapping(self, entity_type: str, association_name: str) -> AssociationMapping:
        """Get the mapping for an association.
        
        Raises:
            AssociationNotRegisteredError: If no mapping is registered
        """
        try:
            return self._mappings[(entity_type, association_name)]
        except KeyError:
            raise AssociationNotRegisteredError(entity_type, association_name) from None
    
    async def count(self, entity_type: str, association_name: str, parent_id: Any) -> int:
        """Count children referencing parent_id."""
        mapping = self.get_mapping(entity_type, association_name)
        
        try:
            exists = await self._db.fetchval(mapping.parent_exists_query, parent_id)
            if exists is None:
                raise EntityNotFoundError(entity_type, str(parent_id))
            
            result = await self._db.fetchval(mapping.child_count_query, parent_id)
            
        except (asyncpg.exceptions.ConnectionDoesNotExistError,
                asyncpg.exceptions.InterfaceError,
                asyncio.TimeoutError,
                OSError) as e:
            raise DatabaseConnectionError(
                f"Database unavailable while counting {entity_type}.{association_name}: {e}",
                details={"entity_type": entity_type, "association_name": association_name},
            ) from e
        except asyncpg.PostgresError as e:
            raise QueryError(
                f"Failed to count {entity_type}.{association_name} for '{parent_id}': {e}",
                details={"entity_type": entity_type, "association_name": association_name},
            ) from e
        
        return int(result or 0)
