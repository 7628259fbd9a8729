"""Health monitoring API package."""
