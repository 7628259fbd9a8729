"""Care management API package."""
