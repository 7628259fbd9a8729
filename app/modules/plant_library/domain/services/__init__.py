"""Plants library domain services."""
