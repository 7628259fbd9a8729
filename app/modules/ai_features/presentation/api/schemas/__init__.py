"""Request/response schemas for plant recommendations."""
