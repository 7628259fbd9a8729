"""Care management domain services."""
