"""Community API package."""
