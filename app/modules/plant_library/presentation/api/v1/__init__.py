"""Plants library API version 1."""
