"""Activities HTTP layer."""
