"""
Common FastAPI dependencies for the Garden Planner application.
Provides paging/sorting parameters shared by every list endpoint.
"""

import logging

from fastapi import Query

from .exceptions import ValidationError
from ..config.settings import get_settings
from ..infrastructure.database.search.pagination import PageRequest, SortDirection

logger = logging.getLogger(__name__)


async def get_page_request(
    page: int = Query(0, ge=0, description="Page index (0-based)"),
    size: int = Query(10, ge=1, description="Page size"),
    sort: str = Query("created_at", description="Sort field"),
    direction: str = Query("DESC", description="Sort direction (ASC or DESC)"),
) -> PageRequest:
    """
    Dependency for paged list endpoints.

    Returns:
        PageRequest: Validated paging parameters

    Raises:
        ValidationError: If size exceeds MAX_PAGE_SIZE or direction is invalid
    """
    max_size = get_settings().MAX_PAGE_SIZE
    if size > max_size:
        raise ValidationError(f"Page size must not exceed {max_size}", field="size", value=size)

    return PageRequest(
        page=page,
        size=size,
        sort=sort,
        direction=SortDirection.parse(direction),
    )


def page_request_with_default_sort(default_sort: str, default_direction: str = "DESC"):
    """
    Variant of :func:`get_page_request` for resources sorted by something
    other than newest-first by default.
    """

    async def dependency(
        page: int = Query(0, ge=0, description="Page index (0-based)"),
        size: int = Query(10, ge=1, description="Page size"),
        sort: str = Query(default_sort, description="Sort field"),
        direction: str = Query(default_direction, description="Sort direction (ASC or DESC)"),
    ) -> PageRequest:
        return await get_page_request(page=page, size=size, sort=sort, direction=direction)

    return dependency
