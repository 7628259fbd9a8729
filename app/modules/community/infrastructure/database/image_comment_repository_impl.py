# 📄 File: app/modules/community/infrastructure/database/image_comment_repository_impl.py
# 🧭 Purpose (Layman Explanation):
# Stores, finds and counts comments on garden photos.
# 🧪 Purpose (Technical Summary):
# SQLAlchemy implementation of ImageCommentRepository.
# 🔗 Dependencies:
# SQLAlchemyRepository, ImageCommentModel
# 🔄 Connected Modules / Calls From:
# app.modules.community.presentation.dependencies

from typing import Optional
from uuid import UUID

from sqlalchemy import true

from app.modules.community.domain.repositories.image_comment_repository import ImageCommentRepository
from app.modules.community.infrastructure.database.models import ImageCommentModel
from app.shared.infrastructure.database.repository import SQLAlchemyRepository
from app.shared.infrastructure.database.search import Page, PageRequest


class ImageCommentRepositoryImpl(SQLAlchemyRepository, ImageCommentRepository):

    model = ImageCommentModel
    entity_name = "image comment"

    async def find_all(self, page_request: PageRequest) -> Page:
        return await self._page(true(), page_request)

    async def get_by_id(self, comment_id: UUID) -> Optional[ImageCommentModel]:
        return await self._get(comment_id)

    async def create(self, comment: ImageCommentModel) -> ImageCommentModel:
        return await self._add(comment)

    async def update(self, comment: ImageCommentModel) -> ImageCommentModel:
        return await self._flush(comment)

    async def delete(self, comment_id: UUID) -> bool:
        return await self._delete(comment_id)

    async def find_by_image_id(self, image_id: UUID, page_request: PageRequest) -> Page:
        return await self._page(ImageCommentModel.image_id == image_id, page_request)

    async def find_by_user_id(self, user_id: UUID, page_request: PageRequest) -> Page:
        return await self._page(ImageCommentModel.user_id == user_id, page_request)

    async def count_by_image_id(self, image_id: UUID) -> int:
        return await self._count(ImageCommentModel.image_id == image_id)
