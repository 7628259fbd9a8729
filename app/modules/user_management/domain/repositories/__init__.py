"""Repository interfaces for profiles."""
