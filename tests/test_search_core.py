"""
Tests for the shared search toolkit: criteria cleaning, AND/OR predicate
composition, page requests and the relevance fallback.
"""

import asyncio
from dataclasses import dataclass
from typing import Optional
from unittest.mock import AsyncMock, patch

import pytest

from app.modules.plant_library.infrastructure.database.models import PlantsLibraryModel
from app.shared.core.exceptions import NotFoundError, RepositoryError, ValidationError
from app.shared.infrastructure.database.search import (
    FilterField,
    MatchKind,
    Page,
    PageRequest,
    SearchCriteria,
    SortDirection,
    clean,
    compose_and,
    compose_or,
    search_with_fallback,
)


def _run(coro):
    return asyncio.run(coro)


def _sql(expression) -> str:
    return str(expression.compile(compile_kwargs={"literal_binds": True}))


@dataclass(frozen=True)
class LibraryCriteria(SearchCriteria):
    common_name: Optional[str] = None
    plant_type: Optional[str] = None
    time_to_harvest: Optional[float] = None
    medicinal: Optional[bool] = None


TABLE = (
    FilterField("common_name", MatchKind.CONTAINS),
    FilterField("plant_type", MatchKind.CONTAINS),
    FilterField("time_to_harvest", MatchKind.EQUALS),
    FilterField("medicinal", MatchKind.EQUALS),
)


# =============================================================================
# CRITERIA
# =============================================================================

@pytest.mark.parametrize("value", [None, "", "   ", "\t\n"])
def test_clean_treats_blank_as_absent(value):
    assert clean(value) is None


@pytest.mark.parametrize("value", ["basil", " basil ", 0, 0.0, False])
def test_clean_keeps_real_values(value):
    assert clean(value) == value


def test_criteria_normalizes_blank_fields_on_construction():
    criteria = LibraryCriteria(common_name="  ", plant_type="Herb", medicinal=False)

    assert criteria.common_name is None
    assert criteria.present() == {"plant_type": "Herb", "medicinal": False}
    assert not criteria.is_empty()


def test_criteria_from_params_ignores_unknown_keys():
    criteria = LibraryCriteria.from_params(common_name="Tomato", page=2, sort="created_at")

    assert criteria.present() == {"common_name": "Tomato"}


def test_empty_criteria():
    assert LibraryCriteria().is_empty()
    assert LibraryCriteria(common_name="", plant_type=" ").is_empty()


# =============================================================================
# PREDICATE COMPOSITION
# =============================================================================

def test_compose_and_without_criteria_is_always_true():
    sql = _sql(compose_and(PlantsLibraryModel, LibraryCriteria(), TABLE))

    assert "LIKE" not in sql.upper()
    assert "plants_library" not in sql


def test_compose_and_uses_contains_for_strings_and_equality_for_numbers_and_flags():
    criteria = LibraryCriteria(common_name="Tom", time_to_harvest=60.0, medicinal=True)
    sql = _sql(compose_and(PlantsLibraryModel, criteria, TABLE)).lower()

    assert "lower(plants_library.common_name) like" in sql
    assert "'tom'" in sql
    assert "plants_library.time_to_harvest = 60.0" in sql
    assert "plants_library.medicinal = 1" in sql or "plants_library.medicinal = true" in sql
    assert " and " in sql
    assert "plant_type" not in sql


def test_compose_and_escapes_like_wildcards():
    sql = _sql(compose_and(PlantsLibraryModel, LibraryCriteria(common_name="50%_off"), TABLE))

    assert "50/%/_off" in sql
    assert "ESCAPE '/'" in sql


def test_compose_or_blank_query_adds_no_text_filter():
    sql = _sql(compose_or(PlantsLibraryModel, "   ", ("common_name", "origin")))

    assert "LIKE" not in sql.upper()


def test_compose_or_matches_any_attribute_and_applies_scope():
    expression = compose_or(
        PlantsLibraryModel,
        "mint",
        ("common_name", "origin"),
        scope={"plant_type": "Herb", "climate": None},
    )
    sql = _sql(expression).lower()

    assert "lower(plants_library.common_name) like" in sql
    assert "lower(plants_library.origin) like" in sql
    assert "'mint'" in sql
    assert " or " in sql
    assert "plants_library.plant_type = 'herb'" in sql
    assert "climate" not in sql


# =============================================================================
# PAGINATION
# =============================================================================

def test_page_request_defaults():
    request = PageRequest()

    assert (request.page, request.size, request.sort, request.direction) == (0, 10, "created_at", SortDirection.DESC)
    assert request.offset == 0


def test_page_request_offset_and_sort_attribute():
    request = PageRequest(page=3, size=20, sort="createdAt", direction="asc")

    assert request.offset == 60
    assert request.sort_attribute == "created_at"
    assert request.direction is SortDirection.ASC


@pytest.mark.parametrize("page,size", [(-1, 10), (0, 0), (0, -5)])
def test_page_request_rejects_invalid_values(page, size):
    with pytest.raises(ValidationError):
        PageRequest(page=page, size=size)


def test_sort_direction_rejects_unknown_value():
    with pytest.raises(ValidationError):
        SortDirection.parse("sideways")


def test_page_total_pages_and_map():
    page = Page(content=[1, 2, 3], total_elements=23, page=0, size=10)

    assert page.total_pages == 3
    mapped = page.map(lambda n: n * 10)
    assert mapped.content == [10, 20, 30]
    assert mapped.to_dict() == {
        "content": [10, 20, 30],
        "total_elements": 23,
        "total_pages": 3,
        "page": 0,
        "size": 10,
    }


def test_empty_page_has_zero_pages():
    assert Page(content=[], total_elements=0, page=0, size=10).total_pages == 0


# =============================================================================
# RELEVANCE FALLBACK
# =============================================================================

def test_fallback_not_used_when_ranked_search_succeeds():
    ranked = AsyncMock(return_value="ranked page")
    plain = AsyncMock(return_value="plain page")

    assert _run(search_with_fallback(ranked, plain, "plants")) == "ranked page"
    plain.assert_not_awaited()


@pytest.mark.parametrize("error", [RepositoryError("boom"), RuntimeError("no similarity()")])
def test_fallback_answers_with_plain_search_and_logs_warning(error):
    ranked = AsyncMock(side_effect=error)
    plain = AsyncMock(return_value="plain page")

    with patch("app.shared.infrastructure.database.search.relevance.logger") as logger:
        result = _run(search_with_fallback(ranked, plain, "garden plans", criteria={"name": "herb"}))

    assert result == "plain page"
    plain.assert_awaited_once()
    logger.warning.assert_called_once()
    assert logger.warning.call_args.kwargs["search_context"] == "garden plans"


@pytest.mark.parametrize("error", [ValidationError("bad sort"), NotFoundError("gone")])
def test_fallback_does_not_hide_caller_errors(error):
    ranked = AsyncMock(side_effect=error)
    plain = AsyncMock(return_value="plain page")

    with pytest.raises(type(error)):
        _run(search_with_fallback(ranked, plain, "profiles"))
    plain.assert_not_awaited()


def test_fallback_propagates_plain_search_failure():
    ranked = AsyncMock(side_effect=RepositoryError("ranked failed"))
    plain = AsyncMock(side_effect=RepositoryError("plain failed"))

    with pytest.raises(RepositoryError, match="plain failed"):
        _run(search_with_fallback(ranked, plain, "plants"))
