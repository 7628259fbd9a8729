"""Health monitoring domain services."""
