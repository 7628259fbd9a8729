"""User management API version 1."""
