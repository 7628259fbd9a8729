# 📄 File: app/modules/community/domain/services/garden_image_service.py
# 🧭 Purpose (Layman Explanation):
# Manages garden photos: uploading their details, editing, removing and finding them.
# 🧪 Purpose (Technical Summary):
# Domain service over GardenImageRepository.
# 🔗 Dependencies:
# GardenImageRepository, community schemas
# 🔄 Connected Modules / Calls From:
# app.modules.community.presentation.api.v1.garden_images

import logging
from typing import List, Optional
from uuid import UUID

from app.shared.config.database import utc_now
from app.shared.core.exceptions import NotFoundError
from app.shared.infrastructure.database.search import Page, PageRequest

from ..repositories.garden_image_repository import GardenImageRepository
from app.modules.community.infrastructure.database.models import GardenImageModel
from app.modules.community.presentation.api.schemas.community_schemas import (
    GardenImageRequest,
    GardenImageResponse,
)

logger = logging.getLogger(__name__)


def to_response(image: GardenImageModel) -> GardenImageResponse:
    return GardenImageResponse.model_validate(image, from_attributes=True)


class GardenImageService:

    def __init__(self, repository: GardenImageRepository):
        self.repository = repository

    async def find_all(self, page_request: PageRequest) -> Page:
        return (await self.repository.find_all(page_request)).map(to_response)

    async def list_all(self) -> List[GardenImageResponse]:
        return [to_response(image) for image in await self.repository.list_all()]

    async def get_by_id(self, image_id: UUID) -> GardenImageResponse:
        return to_response(await self._require(image_id))

    async def create(self, request: GardenImageRequest) -> GardenImageResponse:
        image = await self.repository.create(GardenImageModel(**request.model_dump(), created_at=utc_now()))
        return to_response(image)

    async def update(self, image_id: UUID, request: GardenImageRequest) -> GardenImageResponse:
        image = await self._require(image_id)
        for field, value in request.model_dump().items():
            setattr(image, field, value)
        return to_response(await self.repository.update(image))

    async def delete(self, image_id: UUID) -> None:
        if not await self.repository.delete(image_id):
            raise NotFoundError(
                f"Garden image not found with id: {image_id}",
                resource_type="garden_image",
                resource_id=image_id,
            )

    async def find_by_garden_plan_id(self, garden_plan_id: UUID, page_request: PageRequest) -> Page:
        return (await self.repository.find_by_garden_plan_id(garden_plan_id, page_request)).map(to_response)

    async def search(self, title: Optional[str], garden_plan_id: Optional[UUID], page_request: PageRequest) -> Page:
        return (await self.repository.search(title, garden_plan_id, page_request)).map(to_response)

    async def _require(self, image_id: UUID) -> GardenImageModel:
        image = await self.repository.get_by_id(image_id)
        if image is None:
            raise NotFoundError(
                f"Garden image not found with id: {image_id}",
                resource_type="garden_image",
                resource_id=image_id,
            )
        return image
