"""Core shared components for neo-counter-cache."""
