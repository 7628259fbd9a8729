"""Weather API version 1."""
