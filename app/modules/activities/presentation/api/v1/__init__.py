"""Activities API version 1."""
