"""Request/response schemas for garden images, comments and likes."""
