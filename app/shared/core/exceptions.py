# 📄 File: app/shared/core/exceptions.py
# 🧭 Purpose (Layman Explanation):
# Defines the special error types the Garden Planner app uses to say what went
# wrong (bad input, missing record, duplicate like, broken database) clearly.
# 🧪 Purpose (Technical Summary):
# Custom exception hierarchy carrying HTTP status codes, machine-readable
# error codes and details, rendered into the error envelope by the API layer.
# 🔗 Dependencies:
# FastAPI status constants, typing
# 🔄 Connected Modules / Calls From:
# Repositories, domain services, external API clients, error handling middleware

from typing import Any, Dict, Optional

from fastapi import status


class GardenAppException(Exception):
    """
    Base exception class for the Garden Planner application.
    All custom exceptions inherit from this class.
    """

    def __init__(
        self,
        message: str,
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        details: Optional[Dict[str, Any]] = None,
        error_code: Optional[str] = None
    ):
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        self.error_code = error_code or self.__class__.__name__.upper()
        super().__init__(self.message)


# =============================================================================
# CALLER INPUT EXCEPTIONS
# =============================================================================

class ValidationError(GardenAppException):
    """
    Raised when caller input does not meet validation requirements.

    Never triggers the relevance search fallback.
    """

    def __init__(
        self,
        message: str = "Validation failed",
        field: Optional[str] = None,
        value: Optional[Any] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        details = details or {}
        if field:
            details["field"] = field
        if value is not None:
            details["value"] = str(value)

        super().__init__(
            message=message,
            status_code=status.HTTP_400_BAD_REQUEST,
            details=details,
            error_code="VALIDATION_ERROR"
        )


class NotFoundError(GardenAppException):
    """Raised when a requested entity does not exist."""

    def __init__(
        self,
        message: str = "Resource not found",
        resource_type: Optional[str] = None,
        resource_id: Optional[Any] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        details = details or {}
        if resource_type:
            details["resource_type"] = resource_type
        if resource_id is not None:
            details["resource_id"] = str(resource_id)

        super().__init__(
            message=message,
            status_code=status.HTTP_404_NOT_FOUND,
            details=details,
            error_code="RESOURCE_NOT_FOUND"
        )


class DuplicateResourceError(GardenAppException):
    """
    Raised when attempting to create a resource that already exists,
    e.g. liking the same image twice.
    """

    def __init__(
        self,
        message: str = "Resource already exists",
        resource_type: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        details = details or {}
        if resource_type:
            details["resource_type"] = resource_type

        super().__init__(
            message=message,
            status_code=status.HTTP_409_CONFLICT,
            details=details,
            error_code="DUPLICATE_RESOURCE"
        )


# =============================================================================
# INFRASTRUCTURE EXCEPTIONS
# =============================================================================

class DatabaseError(GardenAppException):
    """Raised for connection, session and engine level failures."""

    def __init__(self, message: str = "Database operation failed", details: Optional[Dict[str, Any]] = None):
        super().__init__(
            message=message,
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            details=details,
            error_code="DATABASE_ERROR"
        )


class RepositoryError(GardenAppException):
    """Raised when a repository query or write fails."""

    def __init__(
        self,
        message: str = "Repository operation failed",
        operation: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        details = details or {}
        if operation:
            details["operation"] = operation

        super().__init__(
            message=message,
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            details=details,
            error_code="REPOSITORY_ERROR"
        )


class TransactionError(GardenAppException):
    """Raised when a unit of work cannot be committed."""

    def __init__(self, message: str = "Transaction failed", details: Optional[Dict[str, Any]] = None):
        super().__init__(
            message=message,
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            details=details,
            error_code="TRANSACTION_ERROR"
        )


class ExternalAPIError(GardenAppException):
    """Raised when a weather, OpenAI, Unsplash or plant data call fails."""

    def __init__(
        self,
        message: str = "External service request failed",
        api_name: Optional[str] = None,
        status_code: int = status.HTTP_502_BAD_GATEWAY,
        details: Optional[Dict[str, Any]] = None
    ):
        details = details or {}
        if api_name:
            details["api_name"] = api_name
        self.api_name = api_name

        super().__init__(
            message=message,
            status_code=status_code,
            details=details,
            error_code="EXTERNAL_API_ERROR"
        )


class APITimeoutError(ExternalAPIError):
    """Raised when an external API does not answer in time."""

    def __init__(self, message: str = "External service timed out", api_name: Optional[str] = None):
        super().__init__(
            message=message,
            api_name=api_name,
            status_code=status.HTTP_504_GATEWAY_TIMEOUT,
        )
        self.error_code = "EXTERNAL_API_TIMEOUT"


class ServiceNotConfiguredError(GardenAppException):
    """Raised when an external integration is called without its credentials."""

    def __init__(self, message: str = "Service is not configured", service: Optional[str] = None):
        super().__init__(
            message=message,
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            details={"service": service} if service else None,
            error_code="CONFIGURATION_ERROR"
        )


def is_client_error(exception: Exception) -> bool:
    """Check if an exception was caused by caller input."""
    return isinstance(exception, GardenAppException) and 400 <= exception.status_code < 500


__all__ = [
    "GardenAppException",
    "ValidationError",
    "NotFoundError",
    "DuplicateResourceError",
    "DatabaseError",
    "RepositoryError",
    "TransactionError",
    "ExternalAPIError",
    "APITimeoutError",
    "ServiceNotConfiguredError",
    "is_client_error",
]
