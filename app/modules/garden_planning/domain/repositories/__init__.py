"""Repository interfaces for garden plans and garden plants."""
