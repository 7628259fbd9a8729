"""Request/response schemas for garden plans and plants."""
