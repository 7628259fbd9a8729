"""User management HTTP layer."""
