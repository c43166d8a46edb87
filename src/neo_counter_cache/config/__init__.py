"""Configuration for neo-counter-cache."""

from .settings import CounterCacheSettings, StoreBackend, get_settings
from .logging_config import LoggingConfig, setup_logging, get_logger

__all__ = [
    "CounterCacheSettings",
    "StoreBackend",
    "get_settings",
    "LoggingConfig",
    "setup_logging",
    "get_logger",
]
