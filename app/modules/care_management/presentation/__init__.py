"""Care management HTTP layer."""
