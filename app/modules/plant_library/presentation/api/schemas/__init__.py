"""Request/response schemas for the plants library API."""
