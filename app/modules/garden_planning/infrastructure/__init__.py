"""Persistence for garden planning."""
