"""Garden planning domain layer: repository contracts and services."""
