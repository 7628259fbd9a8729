"""Persistence and the external plant data provider for the plants library."""
