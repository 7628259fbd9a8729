"""Persistence for activities."""
