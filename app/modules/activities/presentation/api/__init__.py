"""Activities API package."""
