# 📄 File: app/modules/garden_planning/infrastructure/database/plant_repository_impl.py
# 🧭 Purpose (Layman Explanation):
# This file handles all database operations for the plants placed in garden plans, including keyword
# search and the ranked search that lists the closest name matches first.
#
# 🧪 Purpose (Technical Summary):
# Concrete implementation of PlantRepository using SQLAlchemy. Ranked search weights name 100/80/60,
# type 50/40/30, watering frequency and sunlight requirements 25/20/15 each, +10 for a query hit,
# and runs inside a SAVEPOINT.
#
# 🔗 Dependencies:
# - app.modules.garden_planning.domain.repositories.plant_repository (interface, criteria)
# - app.modules.garden_planning.infrastructure.database.models (PlantModel)
# - app.shared.infrastructure.database (base repository, search toolkit)
#
# 🔄 Connected Modules / Calls From:
# - app.modules.garden_planning.presentation.dependencies (repository construction)

import logging
from typing import List, Optional
from uuid import UUID

from sqlalchemy import and_, true

from app.modules.garden_planning.domain.repositories.plant_repository import (
    PlantRepository,
    PlantSearchCriteria,
)
from app.modules.garden_planning.infrastructure.database.models import PlantModel
from app.shared.infrastructure.database.repository import SQLAlchemyRepository
from app.shared.infrastructure.database.search import (
    FilterField,
    MatchKind,
    Page,
    PageRequest,
    compose_and,
    compose_or,
    match_score,
)
from app.shared.infrastructure.database.search.relevance import query_bonus

logger = logging.getLogger(__name__)

SEARCH_ATTRIBUTES = ("name", "description", "type", "watering_frequency", "sunlight_requirements")

RANKED_FILTERS = (
    FilterField("name", MatchKind.CONTAINS),
    FilterField("type", MatchKind.CONTAINS),
    FilterField("watering_frequency", MatchKind.CONTAINS),
    FilterField("sunlight_requirements", MatchKind.CONTAINS),
    FilterField("garden_plan_id", MatchKind.EQUALS),
)


class PlantRepositoryImpl(SQLAlchemyRepository, PlantRepository):
    """
    SQLAlchemy implementation of the PlantRepository interface.
    """

    model = PlantModel
    entity_name = "plant"

    async def find_all(self, page_request: PageRequest) -> Page:
        return await self._page(true(), page_request)

    async def list_all(self) -> List[PlantModel]:
        return await self._list(true(), PlantModel.created_at.desc())

    async def get_by_id(self, plant_id: UUID) -> Optional[PlantModel]:
        return await self._get(plant_id)

    async def create(self, plant: PlantModel) -> PlantModel:
        return await self._add(plant)

    async def update(self, plant: PlantModel) -> PlantModel:
        return await self._flush(plant)

    async def delete(self, plant_id: UUID) -> bool:
        return await self._delete(plant_id)

    async def find_by_garden_plan_id(self, garden_plan_id: UUID, page_request: PageRequest) -> Page:
        return await self._page(PlantModel.garden_plan_id == garden_plan_id, page_request)

    async def list_by_garden_plan_id(self, garden_plan_id: UUID) -> List[PlantModel]:
        return await self._list(PlantModel.garden_plan_id == garden_plan_id, PlantModel.created_at.asc())

    async def find_by_type(self, plant_type: str, page_request: PageRequest) -> Page:
        return await self._page(PlantModel.type == plant_type, page_request)

    async def list_by_type(self, plant_type: str) -> List[PlantModel]:
        return await self._list(PlantModel.type == plant_type, PlantModel.created_at.desc())

    async def search(
        self,
        query: Optional[str],
        garden_plan_id: Optional[UUID],
        page_request: PageRequest,
    ) -> Page:
        where = compose_or(PlantModel, query, SEARCH_ATTRIBUTES, scope={"garden_plan_id": garden_plan_id})
        return await self._page(where, page_request)

    async def search_ranked(self, criteria: PlantSearchCriteria, page_request: PageRequest) -> Page:
        text_filter = compose_or(PlantModel, criteria.query, SEARCH_ATTRIBUTES)
        score = (
            match_score(PlantModel.name, criteria.name, 100, 80, 60)
            + match_score(PlantModel.type, criteria.type, 50, 40, 30)
            + match_score(PlantModel.watering_frequency, criteria.watering_frequency, 25, 20, 15)
            + match_score(PlantModel.sunlight_requirements, criteria.sunlight_requirements, 25, 20, 15)
            + query_bonus(text_filter, criteria.query)
        )
        where = and_(compose_and(PlantModel, criteria, RANKED_FILTERS), text_filter)

        async with self._session.begin_nested():
            return await self._page(where, page_request, order_first=(score.desc(),))
