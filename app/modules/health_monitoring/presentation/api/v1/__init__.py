"""Health monitoring API version 1."""
