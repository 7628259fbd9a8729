# 📄 File: app/modules/garden_planning/infrastructure/database/garden_plan_repository_impl.py
# 🧭 Purpose (Layman Explanation):
# This file handles all database operations for garden plans, including the "best match first" search
# that puts a plan named exactly like the search above one that merely mentions it.
#
# 🧪 Purpose (Technical Summary):
# Concrete implementation of GardenPlanRepository using SQLAlchemy. The ranked search scores rows with
# CASE expressions (name 100/80/60, type 50/40/30, location 25/20/15, +10 for a query hit) and runs
# inside a SAVEPOINT so a failed statement leaves the request transaction usable for the fallback.
#
# 🔗 Dependencies:
# - app.modules.garden_planning.domain.repositories.garden_plan_repository (interface, criteria)
# - app.modules.garden_planning.infrastructure.database.models (GardenPlanModel)
# - app.shared.infrastructure.database (base repository, search toolkit)
#
# 🔄 Connected Modules / Calls From:
# - app.modules.garden_planning.presentation.dependencies (repository construction)

import logging
from typing import List, Optional
from uuid import UUID

from sqlalchemy import and_, true

from app.modules.garden_planning.domain.repositories.garden_plan_repository import (
    GardenPlanRepository,
    GardenPlanSearchCriteria,
)
from app.modules.garden_planning.infrastructure.database.models import GardenPlanModel
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

SEARCH_ATTRIBUTES = ("name", "description", "type", "location")

RANKED_FILTERS = (
    FilterField("name", MatchKind.CONTAINS),
    FilterField("type", MatchKind.CONTAINS),
    FilterField("location", MatchKind.CONTAINS),
    FilterField("user_id", MatchKind.EQUALS),
    FilterField("is_public", MatchKind.EQUALS),
)


class GardenPlanRepositoryImpl(SQLAlchemyRepository, GardenPlanRepository):
    """
    SQLAlchemy implementation of the GardenPlanRepository interface.
    """

    model = GardenPlanModel
    entity_name = "garden plan"

    async def find_all(self, page_request: PageRequest) -> Page:
        return await self._page(true(), page_request)

    async def list_all(self) -> List[GardenPlanModel]:
        return await self._list(true(), GardenPlanModel.created_at.desc())

    async def get_by_id(self, plan_id: UUID) -> Optional[GardenPlanModel]:
        return await self._get(plan_id)

    async def create(self, plan: GardenPlanModel) -> GardenPlanModel:
        return await self._add(plan)

    async def update(self, plan: GardenPlanModel) -> GardenPlanModel:
        return await self._flush(plan)

    async def delete(self, plan_id: UUID) -> bool:
        return await self._delete(plan_id)

    async def find_by_user_id(self, user_id: UUID, page_request: PageRequest) -> Page:
        return await self._page(GardenPlanModel.user_id == user_id, page_request)

    async def list_by_user_id(self, user_id: UUID) -> List[GardenPlanModel]:
        return await self._list(GardenPlanModel.user_id == user_id, GardenPlanModel.created_at.desc())

    async def find_public(self, page_request: PageRequest) -> Page:
        return await self._page(GardenPlanModel.is_public.is_(True), page_request)

    async def list_public(self) -> List[GardenPlanModel]:
        return await self._list(GardenPlanModel.is_public.is_(True), GardenPlanModel.created_at.desc())

    async def search(
        self,
        query: Optional[str],
        user_id: Optional[UUID],
        is_public: Optional[bool],
        page_request: PageRequest,
    ) -> Page:
        where = compose_or(
            GardenPlanModel,
            query,
            SEARCH_ATTRIBUTES,
            scope={"user_id": user_id, "is_public": is_public},
        )
        return await self._page(where, page_request)

    async def search_ranked(self, criteria: GardenPlanSearchCriteria, page_request: PageRequest) -> Page:
        text_filter = compose_or(GardenPlanModel, criteria.query, SEARCH_ATTRIBUTES)
        score = (
            match_score(GardenPlanModel.name, criteria.name, 100, 80, 60)
            + match_score(GardenPlanModel.type, criteria.type, 50, 40, 30)
            + match_score(GardenPlanModel.location, criteria.location, 25, 20, 15)
            + query_bonus(text_filter, criteria.query)
        )
        where = and_(compose_and(GardenPlanModel, criteria, RANKED_FILTERS), text_filter)

        async with self._session.begin_nested():
            return await self._page(where, page_request, order_first=(score.desc(),))
