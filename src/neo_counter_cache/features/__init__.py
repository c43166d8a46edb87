"""Features for neo-counter-cache."""
