"""Response schemas for weather reports."""
