"""Base exceptions for neo-counter-cache.

This module defines the root of the exception hierarchy. All exceptions
raised by the library inherit from NeoCounterCacheError and carry an error
code and structured details for logging.
"""

from typing import Any, Dict, Optional


class NeoCounterCacheError(Exception):
    """Base exception for all neo-counter-cache errors."""
    
    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        *args,
        **kwargs
    ):
        super().__init__(message, *args, **kwargs)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
