"""SQL templates for association counting.

Templates take identifiers through ``str.format``; callers validate every
identifier with ``validate_sql_identifier`` first. Values are always bound
as ``$n`` parameters.
"""

# Basic health check query
BASIC_HEALTH_CHECK = "SELECT 1"

# Parent existence check
PARENT_EXISTS = "SELECT 1 FROM {table} WHERE {parent_key} = $1"

# Child count for one parent
CHILD_COUNT = "SELECT COUNT(*) FROM {table} WHERE {foreign_key} = $1"


def qualified_table(table: str, schema: str = None) -> str:
    """Return ``schema.table`` or ``table`` when no schema is set."""
    return f"{schema}.{table}" if schema else table
