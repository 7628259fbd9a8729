"""Health monitoring domain layer."""
