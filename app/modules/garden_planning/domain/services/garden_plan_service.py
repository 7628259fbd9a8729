# 📄 File: app/modules/garden_planning/domain/services/garden_plan_service.py
# 🧭 Purpose (Layman Explanation):
# Runs garden plans: creating, editing and removing them, listing a gardener's plans or the public
# ones, and answering searches with the best matches first.
# 🧪 Purpose (Technical Summary):
# Domain service over GardenPlanRepository. Advanced search tries the relevance-ranked query and
# falls back to the plain OR search when it fails for any reason other than bad input.
# 🔗 Dependencies:
# GardenPlanRepository, garden plan schemas, app.shared.infrastructure.database.search
# 🔄 Connected Modules / Calls From:
# app.modules.garden_planning.presentation.api.v1.garden_plans, AddPlantService

import logging
from typing import List, Optional
from uuid import UUID

from app.shared.config.database import utc_now
from app.shared.core.exceptions import NotFoundError
from app.shared.infrastructure.database.search import Page, PageRequest, search_with_fallback

from ..repositories.garden_plan_repository import GardenPlanRepository, GardenPlanSearchCriteria
from app.modules.garden_planning.infrastructure.database.models import GardenPlanModel
from app.modules.garden_planning.presentation.api.schemas.garden_plan_schemas import (
    GardenPlanRequest,
    GardenPlanResponse,
)

logger = logging.getLogger(__name__)


def to_response(plan: GardenPlanModel) -> GardenPlanResponse:
    return GardenPlanResponse.model_validate(plan, from_attributes=True)


class GardenPlanService:
    """
    Domain service for garden plans.
    """

    def __init__(self, repository: GardenPlanRepository):
        self.repository = repository

    async def find_all(self, page_request: PageRequest) -> Page:
        return (await self.repository.find_all(page_request)).map(to_response)

    async def list_all(self) -> List[GardenPlanResponse]:
        return [to_response(plan) for plan in await self.repository.list_all()]

    async def get_by_id(self, plan_id: UUID) -> GardenPlanResponse:
        return to_response(await self.require(plan_id))

    async def create(self, request: GardenPlanRequest) -> GardenPlanResponse:
        now = utc_now()
        plan = GardenPlanModel(**request.model_dump(), created_at=now, updated_at=now)
        plan = await self.repository.create(plan)

        logger.info(f"Garden plan created: {plan.id} for user {plan.user_id}")
        return to_response(plan)

    async def update(self, plan_id: UUID, request: GardenPlanRequest) -> GardenPlanResponse:
        plan = await self.require(plan_id)

        for field, value in request.model_dump().items():
            setattr(plan, field, value)
        plan.updated_at = utc_now()

        return to_response(await self.repository.update(plan))

    async def delete(self, plan_id: UUID) -> None:
        if not await self.repository.delete(plan_id):
            raise NotFoundError(
                f"Garden plan not found with id: {plan_id}",
                resource_type="garden_plan",
                resource_id=plan_id,
            )
        logger.info(f"Garden plan deleted: {plan_id}")

    async def find_by_user_id(self, user_id: UUID, page_request: PageRequest) -> Page:
        return (await self.repository.find_by_user_id(user_id, page_request)).map(to_response)

    async def list_by_user_id(self, user_id: UUID) -> List[GardenPlanResponse]:
        return [to_response(plan) for plan in await self.repository.list_by_user_id(user_id)]

    async def find_public(self, page_request: PageRequest) -> Page:
        return (await self.repository.find_public(page_request)).map(to_response)

    async def list_public(self) -> List[GardenPlanResponse]:
        return [to_response(plan) for plan in await self.repository.list_public()]

    async def search(
        self,
        query: Optional[str],
        user_id: Optional[UUID],
        is_public: Optional[bool],
        page_request: PageRequest,
    ) -> Page:
        page = await self.repository.search(query, user_id, is_public, page_request)
        return page.map(to_response)

    async def search_advanced(self, criteria: GardenPlanSearchCriteria, page_request: PageRequest) -> Page:
        """
        Relevance-ranked search with plain-search fallback.

        The fallback keeps the free-text query and the owner / visibility
        scope; the named field filters apply to the ranked path only.
        """
        page = await search_with_fallback(
            lambda: self.repository.search_ranked(criteria, page_request),
            lambda: self.repository.search(criteria.query, criteria.user_id, criteria.is_public, page_request),
            "garden plans",
            criteria=criteria.present(),
        )
        return page.map(to_response)

    async def require(self, plan_id: UUID) -> GardenPlanModel:
        plan = await self.repository.get_by_id(plan_id)
        if plan is None:
            raise NotFoundError(
                f"Garden plan not found with id: {plan_id}",
                resource_type="garden_plan",
                resource_id=plan_id,
            )
        return plan
