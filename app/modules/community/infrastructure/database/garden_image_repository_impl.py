# 📄 File: app/modules/community/infrastructure/database/garden_image_repository_impl.py
# 🧭 Purpose (Layman Explanation):
# Stores and finds garden photos in the database.
# 🧪 Purpose (Technical Summary):
# SQLAlchemy implementation of GardenImageRepository; title search is a case-insensitive contains
# scoped by garden plan.
# 🔗 Dependencies:
# SQLAlchemyRepository, search toolkit, GardenImageModel
# 🔄 Connected Modules / Calls From:
# app.modules.community.presentation.dependencies

from typing import List, Optional
from uuid import UUID

from sqlalchemy import true

from app.modules.community.domain.repositories.garden_image_repository import GardenImageRepository
from app.modules.community.infrastructure.database.models import GardenImageModel
from app.shared.infrastructure.database.repository import SQLAlchemyRepository
from app.shared.infrastructure.database.search import Page, PageRequest, compose_or


class GardenImageRepositoryImpl(SQLAlchemyRepository, GardenImageRepository):

    model = GardenImageModel
    entity_name = "garden image"

    async def find_all(self, page_request: PageRequest) -> Page:
        return await self._page(true(), page_request)

    async def list_all(self) -> List[GardenImageModel]:
        return await self._list(true(), GardenImageModel.created_at.desc())

    async def get_by_id(self, image_id: UUID) -> Optional[GardenImageModel]:
        return await self._get(image_id)

    async def create(self, image: GardenImageModel) -> GardenImageModel:
        return await self._add(image)

    async def update(self, image: GardenImageModel) -> GardenImageModel:
        return await self._flush(image)

    async def delete(self, image_id: UUID) -> bool:
        return await self._delete(image_id)

    async def find_by_garden_plan_id(self, garden_plan_id: UUID, page_request: PageRequest) -> Page:
        return await self._page(GardenImageModel.garden_plan_id == garden_plan_id, page_request)

    async def search(
        self,
        title: Optional[str],
        garden_plan_id: Optional[UUID],
        page_request: PageRequest,
    ) -> Page:
        where = compose_or(GardenImageModel, title, ("title",), scope={"garden_plan_id": garden_plan_id})
        return await self._page(where, page_request)
