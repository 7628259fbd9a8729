"""AI features domain layer."""
