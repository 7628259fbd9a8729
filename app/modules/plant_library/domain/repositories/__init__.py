"""Repository interfaces for plants library entries."""
