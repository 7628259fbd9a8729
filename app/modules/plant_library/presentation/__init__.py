"""Plants library HTTP layer."""
