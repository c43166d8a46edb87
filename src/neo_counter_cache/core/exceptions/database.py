"""Database and repository exceptions for neo-counter-cache."""

from .base import NeoCounterCacheError


class DatabaseError(NeoCounterCacheError):
    """Base class for database errors."""
    pass


class QueryError(DatabaseError):
    """Raised when a query fails to execute."""
    pass


class RepositoryError(DatabaseError):
    """Base class for repository-related errors."""
    pass


class EntityNotFoundError(RepositoryError):
    """Raised when an entity is not found in the repository."""
    
    def __init__(self, entity_type: str, identifier: str):
        self.entity_type = entity_type
        self.identifier = identifier
        super().__init__(
            f"{entity_type} with identifier '{identifier}' not found",
            details={"entity_type": entity_type, "identifier": identifier},
        )


class AssociationNotRegisteredError(RepositoryError):
    """Raised when counting an association that has no table mapping."""
    
    def __init__(self, entity_type: str, association_name: str):
        self.entity_type = entity_type
        self.association_name = association_name
        super().__init__(
            f"No table mapping registered for {entity_type}.{association_name}",
            details={"entity_type": entity_type, "association_name": association_name},
        )
