"""
Repository tests against a real SQLite database: advanced (AND) search, plain
(OR) search, ranked search and its fallback when the ranked SQL fails, likes
and the name based pest/disease lookup.
"""

from datetime import date, timedelta
from unittest.mock import patch
from uuid import uuid4

import pytest
from sqlalchemy import func

from app.modules.community.infrastructure.database.garden_image_repository_impl import GardenImageRepositoryImpl
from app.modules.community.infrastructure.database.image_like_repository_impl import ImageLikeRepositoryImpl
from app.modules.community.infrastructure.database.models import GardenImageModel, ImageLikeModel
from app.modules.care_management.infrastructure.database.models import PlantReminderModel
from app.modules.care_management.infrastructure.database.plant_reminder_repository_impl import (
    PlantReminderRepositoryImpl,
)
from app.modules.garden_planning.domain.repositories.garden_plan_repository import GardenPlanSearchCriteria
from app.modules.garden_planning.domain.repositories.plant_repository import PlantSearchCriteria
from app.modules.garden_planning.domain.services.garden_plan_service import GardenPlanService
from app.modules.garden_planning.domain.services.plant_service import PlantService
from app.modules.garden_planning.infrastructure.database.garden_plan_repository_impl import (
    GardenPlanRepositoryImpl,
)
from app.modules.garden_planning.infrastructure.database.models import GardenPlanModel, PlantModel
from app.modules.garden_planning.infrastructure.database.plant_repository_impl import PlantRepositoryImpl
from app.modules.health_monitoring.infrastructure.database.health_repositories_impl import PestRepositoryImpl
from app.modules.health_monitoring.infrastructure.database.models import PestModel
from app.modules.plant_library.domain.repositories.plant_library_repository import PlantsLibrarySearchCriteria
from app.modules.plant_library.infrastructure.database.models import PlantsLibraryModel
from app.modules.plant_library.infrastructure.database.plant_library_repository_impl import (
    PlantLibraryRepositoryImpl,
)
from app.shared.core.exceptions import DuplicateResourceError
from app.shared.infrastructure.database.search import PageRequest

BY_NAME = PageRequest(page=0, size=50, sort="common_name", direction="ASC")
GARDEN_PLAN_REPOSITORY = "app.modules.garden_planning.infrastructure.database.garden_plan_repository_impl"
PLANT_REPOSITORY = "app.modules.garden_planning.infrastructure.database.plant_repository_impl"


@pytest.fixture
def library(in_session):
    entries = [
        PlantsLibraryModel(common_name="Cherry Tomato", plant_type="Vegetable", origin="South America",
                           time_to_harvest=65, medicinal=False, care_level="Easy"),
        PlantsLibraryModel(common_name="Tomatillo", plant_type="Vegetable", origin="Mexico",
                           time_to_harvest=80, medicinal=False, care_level="Moderate"),
        PlantsLibraryModel(common_name="Peppermint", plant_type="Herb", origin="Europe",
                           time_to_harvest=90, medicinal=True, care_level="Easy"),
        PlantsLibraryModel(common_name="Aloe Vera", plant_type="Succulent", origin="Arabian Peninsula",
                           medicinal=True, short_description="Soothing gel, grows like a tomato weed"),
    ]

    async def seed(session):
        for entry in entries:
            session.add(entry)
        await session.flush()

    in_session(seed)
    return entries


def _names(page):
    return [entry.common_name for entry in page.content]


# =============================================================================
# ADVANCED (AND) SEARCH
# =============================================================================

def test_advanced_search_without_criteria_equals_unfiltered_listing(in_session, library):
    advanced = in_session(lambda s: PlantLibraryRepositoryImpl(s).search_advanced(PlantsLibrarySearchCriteria(), BY_NAME))
    everything = in_session(lambda s: PlantLibraryRepositoryImpl(s).find_all(BY_NAME))

    assert _names(advanced) == _names(everything)
    assert advanced.total_elements == 4


def test_advanced_search_string_field_is_case_insensitive_contains(in_session, library):
    criteria = PlantsLibrarySearchCriteria(common_name="TOMAT")
    page = in_session(lambda s: PlantLibraryRepositoryImpl(s).search_advanced(criteria, BY_NAME))

    assert _names(page) == ["Cherry Tomato", "Tomatillo"]


def test_advanced_search_is_strict_and(in_session, library):
    criteria = PlantsLibrarySearchCriteria(common_name="tomat", care_level="easy")
    page = in_session(lambda s: PlantLibraryRepositoryImpl(s).search_advanced(criteria, BY_NAME))

    assert _names(page) == ["Cherry Tomato"]


def test_advanced_search_flags_and_numbers_use_equality(in_session, library):
    medicinal = in_session(
        lambda s: PlantLibraryRepositoryImpl(s).search_advanced(PlantsLibrarySearchCriteria(medicinal=True), BY_NAME)
    )
    harvest = in_session(
        lambda s: PlantLibraryRepositoryImpl(s).search_advanced(
            PlantsLibrarySearchCriteria(time_to_harvest=80.0), BY_NAME
        )
    )

    assert _names(medicinal) == ["Aloe Vera", "Peppermint"]
    assert _names(harvest) == ["Tomatillo"]


def test_advanced_search_without_match_returns_empty_page(in_session, library):
    criteria = PlantsLibrarySearchCriteria(time_to_harvest=12345.0)
    page = in_session(lambda s: PlantLibraryRepositoryImpl(s).search_advanced(criteria, BY_NAME))

    assert page.content == []
    assert page.total_elements == 0
    assert page.total_pages == 0


def test_blank_criteria_fields_do_not_constrain(in_session, library):
    criteria = PlantsLibrarySearchCriteria(common_name="   ", plant_type="herb")
    page = in_session(lambda s: PlantLibraryRepositoryImpl(s).search_advanced(criteria, BY_NAME))

    assert _names(page) == ["Peppermint"]


# =============================================================================
# PLAIN (OR) SEARCH
# =============================================================================

def test_plain_search_matches_any_search_attribute(in_session, library):
    page = in_session(lambda s: PlantLibraryRepositoryImpl(s).search("tomato", BY_NAME))

    # Aloe Vera matches through its description
    assert _names(page) == ["Aloe Vera", "Cherry Tomato"]


def test_plain_search_blank_query_equals_unfiltered_listing(in_session, library):
    page = in_session(lambda s: PlantLibraryRepositoryImpl(s).search("  ", BY_NAME))

    assert page.total_elements == 4


def test_paging_splits_results(in_session, library):
    second = PageRequest(page=1, size=3, sort="common_name", direction="ASC")
    page = in_session(lambda s: PlantLibraryRepositoryImpl(s).find_all(second))

    assert _names(page) == ["Tomatillo"]
    assert page.total_elements == 4
    assert page.total_pages == 2


# =============================================================================
# RANKED SEARCH
# =============================================================================

@pytest.fixture
def garden(in_session):
    plan = GardenPlanModel(user_id=uuid4(), name="Kitchen Garden", type="Vegetable", location="Kandy")
    other_plan = GardenPlanModel(user_id=uuid4(), name="Balcony Herbs", type="Herb")
    plants = [
        PlantModel(name="Basil Genovese", type="Herb", watering_frequency="Daily"),
        PlantModel(name="Basil", type="Herb", sunlight_requirements="Full sun"),
        PlantModel(name="Thai Basil", type="Herb"),
        PlantModel(name="Tomato", type="Vegetable", description="Grows well next to basil"),
    ]

    async def seed(session):
        session.add_all([plan, other_plan])
        await session.flush()
        for plant in plants:
            plant.garden_plan_id = plan.id
        session.add_all(plants)
        session.add(PlantModel(garden_plan_id=other_plan.id, name="Basil", type="Herb"))
        await session.flush()

    in_session(seed)
    return plan, other_plan


def test_ranked_search_orders_exact_then_prefix_then_contains(in_session, garden):
    plan, _ = garden
    criteria = PlantSearchCriteria(name="basil", garden_plan_id=plan.id)
    page = in_session(lambda s: PlantRepositoryImpl(s).search_ranked(criteria, PageRequest(size=20)))

    assert [p.name for p in page.content] == ["Basil", "Basil Genovese", "Thai Basil"]


def test_plain_plant_search_is_scoped_to_garden_plan(in_session, garden):
    plan, other_plan = garden
    page = in_session(lambda s: PlantRepositoryImpl(s).search("basil", other_plan.id, PageRequest(size=20)))

    assert page.total_elements == 1
    assert page.content[0].garden_plan_id == other_plan.id


def test_garden_plan_ranked_search(in_session, garden):
    criteria = GardenPlanSearchCriteria(query="herb")
    page = in_session(lambda s: GardenPlanRepositoryImpl(s).search_ranked(criteria, PageRequest(size=20)))

    assert [p.name for p in page.content] == ["Balcony Herbs"]


# =============================================================================
# LIKES
# =============================================================================

@pytest.fixture
def image(in_session):
    return in_session(
        lambda s: GardenImageRepositoryImpl(s).create(GardenImageModel(image_url="https://img.example/1.jpg"))
    )


def test_duplicate_like_is_rejected(in_session, image):
    user_id = uuid4()
    in_session(lambda s: ImageLikeRepositoryImpl(s).create(ImageLikeModel(image_id=image.id, user_id=user_id)))

    with pytest.raises(DuplicateResourceError):
        in_session(lambda s: ImageLikeRepositoryImpl(s).create(ImageLikeModel(image_id=image.id, user_id=user_id)))

    assert in_session(lambda s: ImageLikeRepositoryImpl(s).count_by_image_id(image.id)) == 1


def test_unlike_reports_whether_a_like_was_removed(in_session, image):
    user_id = uuid4()
    in_session(lambda s: ImageLikeRepositoryImpl(s).create(ImageLikeModel(image_id=image.id, user_id=user_id)))

    assert in_session(lambda s: ImageLikeRepositoryImpl(s).delete_by_image_and_user(image.id, user_id)) is True
    assert in_session(lambda s: ImageLikeRepositoryImpl(s).delete_by_image_and_user(image.id, user_id)) is False
    assert in_session(lambda s: ImageLikeRepositoryImpl(s).exists(image.id, user_id)) is False


# =============================================================================
# RELEVANCE FALLBACK AGAINST THE DATABASE
# =============================================================================

def _similarity_score(column, value, *weights):
    # similarity() needs PostgreSQL pg_trgm; SQLite rejects it when the statement runs
    return func.similarity(column, value or "")


def test_failed_ranked_query_rolls_back_to_savepoint_and_session_stays_usable(in_session, garden):
    criteria = GardenPlanSearchCriteria(query="kitchen", name="kitchen")

    async def search_then_list(session):
        repository = GardenPlanRepositoryImpl(session)
        page = await GardenPlanService(repository).search_advanced(criteria, PageRequest(size=20))
        return page, await repository.list_all()

    with patch(f"{GARDEN_PLAN_REPOSITORY}.match_score", _similarity_score):
        page, plans = in_session(search_then_list)

    assert [p.name for p in page.content] == ["Kitchen Garden"]
    assert len(plans) == 2


def test_failed_ranked_plant_query_falls_back_to_scoped_plain_search(in_session, garden):
    plan, _ = garden
    criteria = PlantSearchCriteria(query="basil", name="basil", garden_plan_id=plan.id)

    async def search(session):
        return await PlantService(PlantRepositoryImpl(session)).search_advanced(criteria, PageRequest(size=20))

    with patch(f"{PLANT_REPOSITORY}.match_score", _similarity_score):
        page = in_session(search)

    assert sorted(p.name for p in page.content) == ["Basil", "Basil Genovese", "Thai Basil", "Tomato"]


# =============================================================================
# REMINDERS AND HEALTH LOOKUPS
# =============================================================================

def test_due_reminders_include_the_given_day(in_session, garden):
    plan, _ = garden
    today = date(2025, 5, 10)

    async def seed(session):
        plant = PlantModel(garden_plan_id=plan.id, name="Chilli", type="Vegetable")
        session.add(plant)
        await session.flush()
        for offset in (-2, 0, 3):
            session.add(PlantReminderModel(
                plant_id=plant.id,
                garden_plan_id=plan.id,
                reminder_type="Watering",
                reminder_date=today + timedelta(days=offset),
            ))
        await session.flush()

    in_session(seed)
    request = PageRequest(sort="reminder_date", direction="ASC")
    page = in_session(lambda s: PlantReminderRepositoryImpl(s).find_due(today, request))

    assert [r.reminder_date for r in page.content] == [today - timedelta(days=2), today]


def test_pests_are_matched_by_common_name_case_insensitively(in_session):
    async def seed(session):
        session.add_all([
            PestModel(common_name="Aphids"),
            PestModel(common_name="Whitefly"),
            PestModel(common_name="Slugs"),
        ])
        await session.flush()

    in_session(seed)
    pests = in_session(lambda s: PestRepositoryImpl(s).list_by_common_names(["aphids", "WHITEFLY", "Mites"]))

    assert [p.common_name for p in pests] == ["Aphids", "Whitefly"]
    assert in_session(lambda s: PestRepositoryImpl(s).list_by_common_names([])) == []
