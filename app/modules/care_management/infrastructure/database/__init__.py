"""SQLAlchemy model and repository implementation for plant reminders."""
