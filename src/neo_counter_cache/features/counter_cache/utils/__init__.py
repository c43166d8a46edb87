"""Counter cache utilities."""

from .naming import snake_case, singularize, pluralize, default_owner_table, default_foreign_key
from .validation import ensure_parent_id, ensure_count, validate_name, validate_sql_identifier

__all__ = [
    "snake_case",
    "singularize",
    "pluralize",
    "default_owner_table",
    "default_foreign_key",
    "ensure_parent_id",
    "ensure_count",
    "validate_name",
    "validate_sql_identifier",
]
