"""Garden planning domain services."""
