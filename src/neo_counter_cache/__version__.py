"""Version information for neo-counter-cache."""

__version__ = "0.1.0"
