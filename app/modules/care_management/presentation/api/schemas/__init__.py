"""Request/response schemas for plant reminders."""
