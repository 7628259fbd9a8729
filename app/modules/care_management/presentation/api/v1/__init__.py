"""Care management API version 1."""
