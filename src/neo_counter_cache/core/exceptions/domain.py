"""Domain exceptions for neo-counter-cache.

Errors caused by the caller or by configuration, raised before any
collaborator is contacted.
"""

from typing import Any, Optional

from .base import NeoCounterCacheError


class ConfigurationError(NeoCounterCacheError):
    """Raised when a binding or settings value is invalid."""
    pass


class InvalidArgumentError(NeoCounterCacheError, ValueError):
    """Raised when an operation receives an unusable argument."""
    
    def __init__(self, argument: str, reason: str):
        self.argument = argument
        self.reason = reason
        super().__init__(
            f"Invalid argument '{argument}': {reason}",
            details={"argument": argument, "reason": reason},
        )
    
    @classmethod
    def missing_parent_id(cls) -> "InvalidArgumentError":
        """Create error for a null or absent parent identifier."""
        return cls("parent_id", "id must be present")


class InvalidCountError(NeoCounterCacheError):
    """Raised when the count collaborator returns an unusable value."""
    
    def __init__(self, value: Any, key: Optional[str] = None):
        self.value = value
        self.key = key
        super().__init__(
            f"Count query returned invalid value {value!r}; expected a non-negative integer",
            details={"value": repr(value), "key": key},
        )
