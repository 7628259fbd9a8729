"""Request/response schemas for activities."""
