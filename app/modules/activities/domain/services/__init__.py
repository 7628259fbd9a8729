"""Activities domain services."""
