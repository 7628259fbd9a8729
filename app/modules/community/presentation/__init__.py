"""Community HTTP layer."""
