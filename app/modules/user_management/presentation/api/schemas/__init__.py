"""Request/response schemas for profiles."""
