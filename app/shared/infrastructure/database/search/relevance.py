# 📄 File: app/shared/infrastructure/database/search/relevance.py
#
# 🧭 Purpose (Layman Explanation):
# Puts the closest matches first (exact name before "starts with" before
# "contains"). If that smarter search ever breaks, the simple search answers
# instead so the user still gets results.
#
# 🧪 Purpose (Technical Summary):
# CASE-based score expressions and a one-shot ranked -> plain fallback that
# re-raises caller input errors and logs every other failure as a warning.
#
# 🔗 Dependencies:
# - sqlalchemy (case, func, literal)
# - app.shared.core.exceptions (client error boundary)
# - app.shared.utils.logging (structured warning)
#
# 🔄 Connected Modules / Calls From:
# - Garden plan, plant and profile repository implementations

from typing import Any, Awaitable, Callable, Optional, TypeVar

from sqlalchemy import case, func, literal

from app.shared.core.exceptions import is_client_error
from app.shared.utils.logging import get_logger

logger = get_logger(__name__)

T = TypeVar("T")

# Bonus when the free-text query hits any searchable attribute
QUERY_MATCH_BONUS = 10


def match_score(column, value: Optional[str], exact: int, prefix: int, contains: int):
    """
    Score expression for how closely ``column`` matches ``value``.

    Exact (case-insensitive) beats prefix beats substring; no match or no
    value scores 0.
    """
    if value is None:
        return literal(0)

    lowered = func.lower(column)
    needle = value.lower()
    return case(
        (lowered == needle, exact),
        (lowered.startswith(needle, autoescape=True), prefix),
        (lowered.contains(needle, autoescape=True), contains),
        else_=0,
    )


def query_bonus(text_filter, query: Optional[str]):
    """``QUERY_MATCH_BONUS`` when ``text_filter`` holds, 0 otherwise."""
    if query is None:
        return literal(0)
    return case((text_filter, QUERY_MATCH_BONUS), else_=0)


async def search_with_fallback(
    ranked: Callable[[], Awaitable[T]],
    plain: Callable[[], Awaitable[T]],
    context: str,
    **log_fields: Any,
) -> T:
    """
    Run the ranked search, or the plain search if the ranked one fails.

    Caller input errors (4xx application exceptions) propagate unchanged.
    Any other failure is logged once as a warning and answered by ``plain``;
    errors from ``plain`` propagate.
    """
    try:
        return await ranked()
    except Exception as e:
        if is_client_error(e):
            raise
        logger.warning(
            f"Relevance search failed for {context}, falling back to plain search: {e}",
            event_type="search_fallback",
            search_context=context,
            error=str(e),
            **log_fields,
        )
        return await plain()
