"""Activities domain layer."""
