"""Persistence for community features."""
