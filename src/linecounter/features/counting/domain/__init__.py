"""Domain layer for line counting."""
