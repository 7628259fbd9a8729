"""
Core utilities package for the Garden Planner application.
Provides the exception hierarchy, response envelopes and request dependencies.
"""

from .exceptions import (
    GardenAppException,
    ValidationError,
    NotFoundError,
    DuplicateResourceError,
    DatabaseError,
    RepositoryError,
    ExternalAPIError,
)

__all__ = [
    "GardenAppException",
    "ValidationError",
    "NotFoundError",
    "DuplicateResourceError",
    "DatabaseError",
    "RepositoryError",
    "ExternalAPIError",
]
