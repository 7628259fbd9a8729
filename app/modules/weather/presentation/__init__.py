"""Weather presentation layer."""
