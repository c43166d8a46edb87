"""Validation utilities shared by the counter cache services and repositories."""

import re
from typing import Any

from ....core.exceptions import ConfigurationError, InvalidArgumentError, InvalidCountError

# Plain SQL identifiers only; anything else is rejected rather than quoted
SQL_IDENTIFIER_PATTERN = re.compile(r"^[A-Za-z_][A-Za-z0-9_]{0,62}$")


def ensure_parent_id(parent_id: Any) -> Any:
    """Reject a null or blank parent identifier.
    
    Raises:
        InvalidArgumentError: If the identifier is missing
    """
    if parent_id is None:
        raise InvalidArgumentError.missing_parent_id()
    if isinstance(parent_id, str) and not parent_id.strip():
        raise InvalidArgumentError.missing_parent_id()
    return parent_id


def ensure_count(value: Any, key: str = None) -> int:
    """Validate a count returned by a collaborator.
    
    ``bool`` is an ``int`` subclass but never a meaningful count.
    
    Raises:
        InvalidCountError: If the value is not a non-negative integer
    """
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise InvalidCountError(value, key)
    return value


def validate_name(value: str, field_name: str) -> str:
    """Validate a binding name such as an entity type or association name."""
    if not isinstance(value, str) or not value.strip():
        raise ConfigurationError(f"{field_name} cannot be empty")
    return value


def validate_sql_identifier(value: str, field_name: str) -> str:
    """Validate a table, schema or column name before interpolation.
    
    Raises:
        ConfigurationError: If the identifier is not a plain SQL identifier
    """
    if not isinstance(value, str) or not SQL_IDENTIFIER_PATTERN.match(value):
        raise ConfigurationError(f"{field_name} is not a valid SQL identifier: {value!r}")
    return value
