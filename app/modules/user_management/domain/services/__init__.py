"""User management domain services."""
