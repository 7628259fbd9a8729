"""Weather domain layer."""
