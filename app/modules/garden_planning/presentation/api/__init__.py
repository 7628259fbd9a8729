"""Garden planning API package."""
