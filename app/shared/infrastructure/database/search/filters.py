# 📄 File: app/shared/infrastructure/database/search/filters.py
#
# 🧭 Purpose (Layman Explanation):
# Turns search choices into database conditions: "all of these must match" for
# detailed searches and "any of these may match" for the quick search box.
#
# 🧪 Purpose (Technical Summary):
# Declarative (field, match kind) tables folded into SQLAlchemy boolean
# expressions. Strings match case-insensitively by substring, numbers and
# booleans by equality. The AND composer walks the table in declaration order.
#
# 🔗 Dependencies:
# - sqlalchemy (and_, or_, true, ColumnOperators.icontains)
#
# 🔄 Connected Modules / Calls From:
# - Module repository implementations (advanced and plain search)
# - relevance.py (named-field filters of ranked queries)

from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping, Optional, Sequence

from sqlalchemy import and_, or_, true
from sqlalchemy.sql.elements import ColumnElement

from .criteria import SearchCriteria, clean


class MatchKind(str, Enum):
    """How a criteria value is compared with its column."""
    CONTAINS = "contains"
    EQUALS = "equals"


@dataclass(frozen=True)
class FilterField:
    """
    One row of a filter table.

    Attributes:
        name: Criteria field name
        kind: Match kind applied when the field is present
        column: Model attribute when it differs from ``name``
    """
    name: str
    kind: MatchKind
    column: Optional[str] = None

    @property
    def attribute(self) -> str:
        return self.column or self.name


def contains(column, value: Any) -> ColumnElement:
    """Case-insensitive substring match with LIKE wildcards escaped."""
    return column.icontains(str(value), autoescape=True)


def compose_and(
    model,
    criteria: SearchCriteria,
    table: Sequence[FilterField],
) -> ColumnElement:
    """
    Conjunction of one predicate per present criteria field.

    Args:
        model: ORM class the table's attributes belong to
        criteria: Criteria carrying the caller's values
        table: Ordered (field, match kind) declarations

    Returns:
        Boolean expression; always true when no field is present
    """
    clauses = []
    for field in table:
        value = getattr(criteria, field.name, None)
        if value is None:
            continue

        column = getattr(model, field.attribute)
        if field.kind is MatchKind.CONTAINS:
            clauses.append(contains(column, value))
        else:
            clauses.append(column == value)

    return and_(true(), *clauses)


def compose_or(
    model,
    query: Optional[str],
    attributes: Sequence[str],
    scope: Optional[Mapping[str, Any]] = None,
) -> ColumnElement:
    """
    Free-text OR search over ``attributes``, ANDed with exact scope values.

    A blank query adds no text filter. Scope entries whose value is ``None``
    are skipped.
    """
    clauses = []

    text = clean(query)
    if text is not None:
        clauses.append(or_(*(contains(getattr(model, name), text) for name in attributes)))

    for name, value in (scope or {}).items():
        if value is not None:
            clauses.append(getattr(model, name) == value)

    return and_(true(), *clauses)
