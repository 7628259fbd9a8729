"""User management API package."""
