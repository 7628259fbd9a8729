# 📄 File: app/shared/core/responses.py
#
# 🧭 Purpose (Layman Explanation):
# Wraps every answer the API sends in the same outer box (status, message,
# data), so the app on the other side always knows where to look.
#
# 🧪 Purpose (Technical Summary):
# Generic Pydantic response envelopes for single objects, lists and pages,
# plus the error envelope model used in OpenAPI ``responses=`` declarations.
#
# 🔗 Dependencies:
# - pydantic (BaseModel, generics)
# - app.shared.infrastructure.database.search.pagination (Page)
#
# 🔄 Connected Modules / Calls From:
# - Every module router
# - app.api.middleware.error_handling (error envelope)

from datetime import datetime, timezone
from typing import Any, Callable, Dict, Generic, List, Optional, TypeVar

from fastapi import status
from pydantic import BaseModel, Field

from app.shared.infrastructure.database.search.pagination import Page

T = TypeVar("T")


def _now() -> datetime:
    return datetime.now(timezone.utc)


class ApiResponse(BaseModel, Generic[T]):
    """Success envelope."""
    status: int = Field(default=status.HTTP_200_OK, description="HTTP status code")
    message: str = Field(default="Success", description="Human readable outcome")
    data: Optional[T] = Field(default=None, description="Payload")
    timestamp: datetime = Field(default_factory=_now)


class ErrorResponse(BaseModel):
    """Error envelope."""
    status: int
    message: str
    code: str
    timestamp: datetime = Field(default_factory=_now)
    errors: Optional[List[Dict[str, Any]]] = None


class PageResponse(BaseModel, Generic[T]):
    """Serialized page of results."""
    content: List[T] = Field(default_factory=list)
    total_elements: int = 0
    total_pages: int = 0
    page: int = 0
    size: int = 10

    @classmethod
    def from_page(cls, page: Page, mapper: Optional[Callable[[Any], T]] = None) -> "PageResponse[T]":
        if mapper is not None:
            page = page.map(mapper)
        return cls(**page.to_dict())


def ok(data: Any = None, message: str = "Success") -> ApiResponse:
    return ApiResponse(status=status.HTTP_200_OK, message=message, data=data)


def created(data: Any = None, message: str = "Created successfully") -> ApiResponse:
    return ApiResponse(status=status.HTTP_201_CREATED, message=message, data=data)


# Shared OpenAPI error declarations for router decorators
ERROR_RESPONSES = {
    400: {"model": ErrorResponse, "description": "Invalid request parameters"},
    404: {"model": ErrorResponse, "description": "Resource not found"},
    500: {"model": ErrorResponse, "description": "Internal server error"},
}
