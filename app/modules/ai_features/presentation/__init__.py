"""AI features presentation layer."""
