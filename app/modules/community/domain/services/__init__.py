"""Community domain services."""
