"""Counter cache repositories - database-backed count queries."""

from .association_count_repository import AssociationCountRepository, AssociationMapping
from .database_manager import DatabaseManager

__all__ = [
    "AssociationCountRepository",
    "AssociationMapping",
    "DatabaseManager",
]
