# 📄 File: app/modules/plant_library/domain/services/plant_library_service.py
# 🧭 Purpose (Layman Explanation):
# Runs the plant encyclopedia: adds, edits and removes entries and answers searches.
# 🧪 Purpose (Technical Summary):
# Domain service mapping library request schemas onto ORM entries, enforcing existence checks and
# delegating queries to the PlantLibraryRepository.
# 🔗 Dependencies:
# PlantLibraryRepository, plant library schemas, app.shared.core.exceptions
# 🔄 Connected Modules / Calls From:
# app.modules.plant_library.presentation.api.v1.plants_library

import logging
from typing import List, Optional
from uuid import UUID

from app.shared.config.database import utc_now
from app.shared.core.exceptions import NotFoundError
from app.shared.infrastructure.database.search import Page, PageRequest

from ..repositories.plant_library_repository import PlantLibraryRepository, PlantsLibrarySearchCriteria
from app.modules.plant_library.infrastructure.database.models import PlantsLibraryModel
from app.modules.plant_library.presentation.api.schemas.plant_library_schemas import (
    PlantsLibraryRequest,
    PlantsLibraryResponse,
)

logger = logging.getLogger(__name__)


def to_response(entry: PlantsLibraryModel) -> PlantsLibraryResponse:
    return PlantsLibraryResponse.model_validate(entry, from_attributes=True)


class PlantLibraryService:
    """
    Domain service for the plants library.

    Create stamps both timestamps; update overwrites every field with the
    request values and refreshes ``updated_at``.
    """

    def __init__(self, repository: PlantLibraryRepository):
        self.repository = repository

    async def find_all(self, page_request: PageRequest) -> Page:
        page = await self.repository.find_all(page_request)
        return page.map(to_response)

    async def list_all(self) -> List[PlantsLibraryResponse]:
        return [to_response(entry) for entry in await self.repository.list_all()]

    async def get_by_id(self, entry_id: UUID) -> PlantsLibraryResponse:
        return to_response(await self._require(entry_id))

    async def create(self, request: PlantsLibraryRequest) -> PlantsLibraryResponse:
        now = utc_now()
        entry = PlantsLibraryModel(**request.model_dump(), created_at=now, updated_at=now)
        entry = await self.repository.create(entry)

        logger.info(f"Plants library entry created: {entry.id} ({entry.common_name})")
        return to_response(entry)

    async def update(self, entry_id: UUID, request: PlantsLibraryRequest) -> PlantsLibraryResponse:
        entry = await self._require(entry_id)

        for field, value in request.model_dump().items():
            setattr(entry, field, value)
        entry.updated_at = utc_now()

        return to_response(await self.repository.update(entry))

    async def delete(self, entry_id: UUID) -> None:
        if not await self.repository.delete(entry_id):
            raise NotFoundError(
                f"Plant not found with id: {entry_id}",
                resource_type="plants_library",
                resource_id=entry_id,
            )

    async def search(self, query: Optional[str], page_request: PageRequest) -> Page:
        page = await self.repository.search(query, page_request)
        return page.map(to_response)

    async def search_advanced(
        self,
        criteria: PlantsLibrarySearchCriteria,
        page_request: PageRequest,
    ) -> Page:
        page = await self.repository.search_advanced(criteria, page_request)
        return page.map(to_response)

    async def find_by_plant_type(self, plant_type: str, page_request: PageRequest) -> Page:
        page = await self.repository.find_by_plant_type(plant_type, page_request)
        return page.map(to_response)

    async def find_by_life_cycle(self, life_cycle: str, page_request: PageRequest) -> Page:
        page = await self.repository.find_by_life_cycle(life_cycle, page_request)
        return page.map(to_response)

    async def find_medicinal(self, page_request: PageRequest) -> Page:
        page = await self.repository.find_by_medicinal(True, page_request)
        return page.map(to_response)

    async def _require(self, entry_id: UUID) -> PlantsLibraryModel:
        entry = await self.repository.get_by_id(entry_id)
        if entry is None:
            raise NotFoundError(
                f"Plant not found with id: {entry_id}",
                resource_type="plants_library",
                resource_id=entry_id,
            )
        return entry
