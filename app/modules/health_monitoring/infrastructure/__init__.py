"""Persistence for health monitoring."""
