"""AI features API version 1."""
