"""Health monitoring HTTP layer."""
