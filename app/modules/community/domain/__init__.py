"""Community domain layer: repository contracts and services."""
