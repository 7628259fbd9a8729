"""Repository interfaces for garden images, comments and likes."""
