# 📄 File: app/shared/infrastructure/database/search/pagination.py
#
# 🧭 Purpose (Layman Explanation):
# Splits long result lists into pages, remembers how many results there are
# overall and keeps them in the order the user asked for.
#
# 🧪 Purpose (Technical Summary):
# PageRequest/Page value objects and an async paginate() that runs a count
# query and a sorted, offset/limit query for any filtered SELECT.
#
# 🔗 Dependencies:
# - sqlalchemy (select, func.count)
# - app.shared.core.exceptions (ValidationError for bad paging input)
#
# 🔄 Connected Modules / Calls From:
# - Module repository implementations
# - Module routers (PageRequest from query parameters)

import math
import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Dict, Generic, List, Sequence, TypeVar

from sqlalchemy import Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.shared.core.exceptions import ValidationError

T = TypeVar("T")
R = TypeVar("R")

_CAMEL_BOUNDARY = re.compile(r"(?<!^)(?=[A-Z])")


class SortDirection(str, Enum):
    ASC = "ASC"
    DESC = "DESC"

    @classmethod
    def parse(cls, value: str) -> "SortDirection":
        try:
            return cls(value.upper())
        except (AttributeError, ValueError):
            raise ValidationError(
                "Sort direction must be ASC or DESC",
                field="direction",
                value=value,
            )


@dataclass(frozen=True)
class PageRequest:
    """
    Page index (0-based), page size, sort key and direction.

    Raises:
        ValidationError: If page < 0 or size < 1
    """
    page: int = 0
    size: int = 10
    sort: str = "created_at"
    direction: SortDirection = SortDirection.DESC

    def __post_init__(self):
        if self.page < 0:
            raise ValidationError("Page index must not be negative", field="page", value=self.page)
        if self.size < 1:
            raise ValidationError("Page size must be greater than zero", field="size", value=self.size)
        if not isinstance(self.direction, SortDirection):
            object.__setattr__(self, "direction", SortDirection.parse(self.direction))

    @property
    def offset(self) -> int:
        return self.page * self.size

    @property
    def sort_attribute(self) -> str:
        """Sort key in snake_case; ``createdAt`` and ``created_at`` are equivalent."""
        return _CAMEL_BOUNDARY.sub("_", self.sort.strip()).lower()


@dataclass
class Page(Generic[T]):
    """One page of results plus the total number of matching rows."""
    content: List[T] = field(default_factory=list)
    total_elements: int = 0
    page: int = 0
    size: int = 10

    @property
    def total_pages(self) -> int:
        if self.size <= 0:
            return 0
        return math.ceil(self.total_elements / self.size)

    def map(self, fn: Callable[[T], R]) -> "Page[R]":
        return Page(
            content=[fn(item) for item in self.content],
            total_elements=self.total_elements,
            page=self.page,
            size=self.size,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "content": self.content,
            "total_elements": self.total_elements,
            "total_pages": self.total_pages,
            "page": self.page,
            "size": self.size,
        }


def sort_column(model, attribute: str):
    """
    Resolve a sort key to a mapped column.

    Raises:
        ValidationError: If the model has no such column
    """
    if attribute not in model.__table__.columns:
        raise ValidationError(f"Unknown sort field: {attribute}", field="sort", value=attribute)
    return getattr(model, attribute)


async def paginate(
    session: AsyncSession,
    stmt: Select,
    page_request: PageRequest,
    model,
    order_first: Sequence[Any] = (),
) -> Page:
    """
    Execute ``stmt`` as a page.

    Args:
        session: Active async session
        stmt: Filtered ``select(model)`` without ordering
        page_request: Paging and sorting parameters
        model: ORM class used to resolve the sort key
        order_first: Expressions ordered before the requested sort (scores)

    Returns:
        Page of ORM instances
    """
    column = sort_column(model, page_request.sort_attribute)
    ordering = column.asc() if page_request.direction is SortDirection.ASC else column.desc()

    count_stmt = select(func.count()).select_from(stmt.order_by(None).subquery())
    total = (await session.execute(count_stmt)).scalar_one()

    result = await session.execute(
        stmt.order_by(*order_first, ordering, model.id.asc())
        .offset(page_request.offset)
        .limit(page_request.size)
    )

    return Page(
        content=list(result.scalars().all()),
        total_elements=total,
        page=page_request.page,
        size=page_request.size,
    )
