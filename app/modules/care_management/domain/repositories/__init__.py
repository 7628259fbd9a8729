"""Repository interfaces for plant reminders."""
