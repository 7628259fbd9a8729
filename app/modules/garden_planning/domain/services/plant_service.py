# 📄 File: app/modules/garden_planning/domain/services/plant_service.py
# 🧭 Purpose (Layman Explanation):
# Looks after the plants inside garden plans: adding, moving, editing, removing and finding them.
# 🧪 Purpose (Technical Summary):
# Domain service over PlantRepository with relevance-ranked search and plain-search fallback.
# 🔗 Dependencies:
# PlantRepository, plant schemas, app.shared.infrastructure.database.search
# 🔄 Connected Modules / Calls From:
# app.modules.garden_planning.presentation.api.v1.plants

import logging
from typing import List, Optional
from uuid import UUID

from app.shared.config.database import utc_now
from app.shared.core.exceptions import NotFoundError
from app.shared.infrastructure.database.search import Page, PageRequest, search_with_fallback

from ..repositories.plant_repository import PlantRepository, PlantSearchCriteria
from app.modules.garden_planning.infrastructure.database.models import PlantModel
from app.modules.garden_planning.presentation.api.schemas.plant_schemas import PlantRequest, PlantResponse

logger = logging.getLogger(__name__)


def to_response(plant: PlantModel) -> PlantResponse:
    return PlantResponse.model_validate(plant, from_attributes=True)


class PlantService:

    def __init__(self, repository: PlantRepository):
        self.repository = repository

    async def find_all(self, page_request: PageRequest) -> Page:
        return (await self.repository.find_all(page_request)).map(to_response)

    async def list_all(self) -> List[PlantResponse]:
        return [to_response(plant) for plant in await self.repository.list_all()]

    async def get_by_id(self, plant_id: UUID) -> PlantResponse:
        return to_response(await self._require(plant_id))

    async def create(self, request: PlantRequest) -> PlantResponse:
        now = utc_now()
        plant = PlantModel(**request.model_dump(), created_at=now, updated_at=now)
        plant = await self.repository.create(plant)

        logger.info(f"Plant created: {plant.id} in garden plan {plant.garden_plan_id}")
        return to_response(plant)

    async def update(self, plant_id: UUID, request: PlantRequest) -> PlantResponse:
        plant = await self._require(plant_id)

        for field, value in request.model_dump().items():
            setattr(plant, field, value)
        plant.updated_at = utc_now()

        return to_response(await self.repository.update(plant))

    async def delete(self, plant_id: UUID) -> None:
        if not await self.repository.delete(plant_id):
            raise NotFoundError(f"Plant not found with id: {plant_id}", resource_type="plant", resource_id=plant_id)

    async def find_by_garden_plan_id(self, garden_plan_id: UUID, page_request: PageRequest) -> Page:
        return (await self.repository.find_by_garden_plan_id(garden_plan_id, page_request)).map(to_response)

    async def list_by_garden_plan_id(self, garden_plan_id: UUID) -> List[PlantResponse]:
        return [to_response(plant) for plant in await self.repository.list_by_garden_plan_id(garden_plan_id)]

    async def find_by_type(self, plant_type: str, page_request: PageRequest) -> Page:
        return (await self.repository.find_by_type(plant_type, page_request)).map(to_response)

    async def list_by_type(self, plant_type: str) -> List[PlantResponse]:
        return [to_response(plant) for plant in await self.repository.list_by_type(plant_type)]

    async def search(self, query: Optional[str], garden_plan_id: Optional[UUID], page_request: PageRequest) -> Page:
        return (await self.repository.search(query, garden_plan_id, page_request)).map(to_response)

    async def search_advanced(self, criteria: PlantSearchCriteria, page_request: PageRequest) -> Page:
        page = await search_with_fallback(
            lambda: self.repository.search_ranked(criteria, page_request),
            lambda: self.repository.search(criteria.query, criteria.garden_plan_id, page_request),
            "plants",
            criteria=criteria.present(),
        )
        return page.map(to_response)

    async def _require(self, plant_id: UUID) -> PlantModel:
        plant = await self.repository.get_by_id(plant_id)
        if plant is None:
            raise NotFoundError(f"Plant not found with id: {plant_id}", resource_type="plant", resource_id=plant_id)
        return plant
