"""Garden planning HTTP layer."""
