"""Persistence for user management."""
