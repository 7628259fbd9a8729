"""Care management domain layer."""
