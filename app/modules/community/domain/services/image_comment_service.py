# 📄 File: app/modules/community/domain/services/image_comment_service.py
# 🧭 Purpose (Layman Explanation):
# Manages comments people leave on garden photos.
# 🧪 Purpose (Technical Summary):
# Domain service over ImageCommentRepository. Updates change the comment text only.
# 🔗 Dependencies:
# ImageCommentRepository, community schemas
# 🔄 Connected Modules / Calls From:
# app.modules.community.presentation.api.v1.image_comments

import logging
from uuid import UUID

from app.shared.config.database import utc_now
from app.shared.core.exceptions import NotFoundError
from app.shared.infrastructure.database.search import Page, PageRequest

from ..repositories.image_comment_repository import ImageCommentRepository
from app.modules.community.infrastructure.database.models import ImageCommentModel
from app.modules.community.presentation.api.schemas.community_schemas import (
    ImageCommentRequest,
    ImageCommentResponse,
)

logger = logging.getLogger(__name__)


def to_response(comment: ImageCommentModel) -> ImageCommentResponse:
    return ImageCommentResponse.model_validate(comment, from_attributes=True)


class ImageCommentService:

    def __init__(self, repository: ImageCommentRepository):
        self.repository = repository

    async def find_all(self, page_request: PageRequest) -> Page:
        return (await self.repository.find_all(page_request)).map(to_response)

    async def get_by_id(self, comment_id: UUID) -> ImageCommentResponse:
        return to_response(await self._require(comment_id))

    async def create(self, request: ImageCommentRequest) -> ImageCommentResponse:
        comment = await self.repository.create(ImageCommentModel(**request.model_dump(), created_at=utc_now()))
        return to_response(comment)

    async def update(self, comment_id: UUID, request: ImageCommentRequest) -> ImageCommentResponse:
        comment = await self._require(comment_id)
        comment.comment = request.comment
        return to_response(await self.repository.update(comment))

    async def delete(self, comment_id: UUID) -> None:
        if not await self.repository.delete(comment_id):
            raise NotFoundError(
                f"Image comment not found with id: {comment_id}",
                resource_type="image_comment",
                resource_id=comment_id,
            )

    async def find_by_image_id(self, image_id: UUID, page_request: PageRequest) -> Page:
        return (await self.repository.find_by_image_id(image_id, page_request)).map(to_response)

    async def find_by_user_id(self, user_id: UUID, page_request: PageRequest) -> Page:
        return (await self.repository.find_by_user_id(user_id, page_request)).map(to_response)

    async def count_by_image_id(self, image_id: UUID) -> int:
        return await self.repository.count_by_image_id(image_id)

    async def _require(self, comment_id: UUID) -> ImageCommentModel:
        comment = await self.repository.get_by_id(comment_id)
        if comment is None:
            raise NotFoundError(
                f"Image comment not found with id: {comment_id}",
                resource_type="image_comment",
                resource_id=comment_id,
            )
        return comment
