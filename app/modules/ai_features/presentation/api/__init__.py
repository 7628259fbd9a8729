"""AI features API package."""
