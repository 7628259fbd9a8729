"""SQLAlchemy models and repository implementation for the plants library."""
