"""SQLAlchemy models and repository implementations for pests and plant diseases."""
