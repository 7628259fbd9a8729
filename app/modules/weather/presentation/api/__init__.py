"""Weather API package."""
