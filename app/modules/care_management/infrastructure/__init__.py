"""Persistence for care management."""
