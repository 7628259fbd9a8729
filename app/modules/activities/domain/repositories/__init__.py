"""Repository interface for activities."""
