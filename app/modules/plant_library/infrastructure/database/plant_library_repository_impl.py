# 📄 File: app/modules/plant_library/infrastructure/database/plant_library_repository_impl.py
# 🧭 Purpose (Layman Explanation):
# This file handles all database operations for the plant encyclopedia: storing entries, looking them up
# and searching them either with one search box or with a detailed form.
#
# 🧪 Purpose (Technical Summary):
# Concrete implementation of PlantLibraryRepository using SQLAlchemy. Plain search ORs a case-insensitive
# substring match over a fixed attribute list; advanced search folds the criteria table into an AND filter.
#
# 🔗 Dependencies:
# - app.modules.plant_library.domain.repositories.plant_library_repository (interface, criteria)
# - app.modules.plant_library.infrastructure.database.models (PlantsLibraryModel)
# - app.shared.infrastructure.database (base repository, search toolkit)
#
# 🔄 Connected Modules / Calls From:
# - app.modules.plant_library.presentation.dependencies (repository construction)
# - app.modules.garden_planning (library lookups when adding plants)

import logging
from typing import List, Optional
from uuid import UUID

from sqlalchemy import true

from app.modules.plant_library.domain.repositories.plant_library_repository import (
    PlantLibraryRepository,
    PlantsLibrarySearchCriteria,
)
from app.modules.plant_library.infrastructure.database.models import PlantsLibraryModel
from app.shared.infrastructure.database.repository import SQLAlchemyRepository
from app.shared.infrastructure.database.search import (
    FilterField,
    MatchKind,
    Page,
    PageRequest,
    compose_and,
    compose_or,
)

logger = logging.getLogger(__name__)

# Attributes matched by the free-text search box
SEARCH_ATTRIBUTES = (
    "common_name",
    "other_name",
    "scientific_name",
    "short_description",
    "origin",
    "plant_type",
    "climate",
    "life_cycle",
    "watering_frequency",
    "soil_type",
    "sunlight_requirement",
    "ideal_place",
    "care_level",
)

# Advanced search: strings first, then numbers, then flags
ADVANCED_FILTERS = (
    FilterField("common_name", MatchKind.CONTAINS),
    FilterField("other_name", MatchKind.CONTAINS),
    FilterField("scientific_name", MatchKind.CONTAINS),
    FilterField("origin", MatchKind.CONTAINS),
    FilterField("plant_type", MatchKind.CONTAINS),
    FilterField("climate", MatchKind.CONTAINS),
    FilterField("life_cycle", MatchKind.CONTAINS),
    FilterField("watering_frequency", MatchKind.CONTAINS),
    FilterField("soil_type", MatchKind.CONTAINS),
    FilterField("size", MatchKind.CONTAINS),
    FilterField("sunlight_requirement", MatchKind.CONTAINS),
    FilterField("growth_rate", MatchKind.CONTAINS),
    FilterField("ideal_place", MatchKind.CONTAINS),
    FilterField("care_level", MatchKind.CONTAINS),
    FilterField("best_planting_season", MatchKind.CONTAINS),
    FilterField("time_to_harvest", MatchKind.EQUALS),
    FilterField("flower", MatchKind.EQUALS),
    FilterField("fruit", MatchKind.EQUALS),
    FilterField("medicinal", MatchKind.EQUALS),
)


class PlantLibraryRepositoryImpl(SQLAlchemyRepository, PlantLibraryRepository):
    """
    SQLAlchemy implementation of the PlantLibraryRepository interface.
    """

    model = PlantsLibraryModel
    entity_name = "plants library entry"

    async def find_all(self, page_request: PageRequest) -> Page:
        return await self._page(true(), page_request)

    async def list_all(self) -> List[PlantsLibraryModel]:
        return await self._list(true(), PlantsLibraryModel.common_name.asc())

    async def get_by_id(self, entry_id: UUID) -> Optional[PlantsLibraryModel]:
        entry = await self._get(entry_id)
        if entry is None:
            logger.debug(f"Plants library entry not found: {entry_id}")
        return entry

    async def create(self, entry: PlantsLibraryModel) -> PlantsLibraryModel:
        return await self._add(entry)

    async def update(self, entry: PlantsLibraryModel) -> PlantsLibraryModel:
        return await self._flush(entry)

    async def delete(self, entry_id: UUID) -> bool:
        return await self._delete(entry_id)

    async def search(self, query: Optional[str], page_request: PageRequest) -> Page:
        where = compose_or(PlantsLibraryModel, query, SEARCH_ATTRIBUTES)
        return await self._page(where, page_request)

    async def search_advanced(
        self,
        criteria: PlantsLibrarySearchCriteria,
        page_request: PageRequest,
    ) -> Page:
        logger.debug(f"Advanced plants library search with {criteria.present()}")
        where = compose_and(PlantsLibraryModel, criteria, ADVANCED_FILTERS)
        return await self._page(where, page_request)

    async def find_by_plant_type(self, plant_type: str, page_request: PageRequest) -> Page:
        return await self._page(PlantsLibraryModel.plant_type == plant_type, page_request)

    async def find_by_life_cycle(self, life_cycle: str, page_request: PageRequest) -> Page:
        return await self._page(PlantsLibraryModel.life_cycle == life_cycle, page_request)

    async def find_by_medicinal(self, medicinal: bool, page_request: PageRequest) -> Page:
        return await self._page(PlantsLibraryModel.medicinal == medicinal, page_request)
