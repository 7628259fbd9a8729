"""Prompt building, answer parsing and the recommendation service."""
