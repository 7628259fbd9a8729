"""Plants library API package."""
