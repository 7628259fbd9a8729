"""SQLAlchemy model and repository implementation for activities."""
