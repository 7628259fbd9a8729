"""Community API version 1."""
