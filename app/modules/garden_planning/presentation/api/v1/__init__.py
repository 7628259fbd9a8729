"""Garden planning API version 1."""
