# 📄 File: app/modules/community/domain/services/image_like_service.py
# 🧭 Purpose (Layman Explanation):
# Handles liking and unliking garden photos. Liking twice is refused; unliking twice is harmless.
# 🧪 Purpose (Technical Summary):
# Domain service over ImageLikeRepository: create (409 on duplicate), toggle, idempotent unlike,
# has-liked checks and counts.
# 🔗 Dependencies:
# ImageLikeRepository, community schemas, app.shared.core.exceptions
# 🔄 Connected Modules / Calls From:
# app.modules.community.presentation.api.v1.image_likes

import logging
from uuid import UUID

from app.shared.config.database import utc_now
from app.shared.core.exceptions import DuplicateResourceError, NotFoundError
from app.shared.infrastructure.database.search import Page, PageRequest

from ..repositories.image_like_repository import ImageLikeRepository
from app.modules.community.infrastructure.database.models import ImageLikeModel
from app.modules.community.presentation.api.schemas.community_schemas import (
    ImageLikeRequest,
    ImageLikeResponse,
)

logger = logging.getLogger(__name__)


def to_response(like: ImageLikeModel) -> ImageLikeResponse:
    return ImageLikeResponse.model_validate(like, from_attributes=True)


class ImageLikeService:
    """
    Domain service for image likes.

    Unlike is idempotent: the first call reports ``True``, later calls
    ``False``, and none of them fail.
    """

    def __init__(self, repository: ImageLikeRepository):
        self.repository = repository

    async def find_all(self, page_request: PageRequest) -> Page:
        return (await self.repository.find_all(page_request)).map(to_response)

    async def get_by_id(self, like_id: UUID) -> ImageLikeResponse:
        like = await self.repository.get_by_id(like_id)
        if like is None:
            raise NotFoundError(
                f"Image like not found with id: {like_id}",
                resource_type="image_like",
                resource_id=like_id,
            )
        return to_response(like)

    async def find_by_image_id(self, image_id: UUID, page_request: PageRequest) -> Page:
        return (await self.repository.find_by_image_id(image_id, page_request)).map(to_response)

    async def count_by_image_id(self, image_id: UUID) -> int:
        return await self.repository.count_by_image_id(image_id)

    async def has_user_liked(self, image_id: UUID, user_id: UUID) -> bool:
        return await self.repository.exists(image_id, user_id)

    async def create(self, request: ImageLikeRequest) -> ImageLikeResponse:
        """
        Like an image.

        Raises:
            DuplicateResourceError: If the user already likes the image
        """
        if await self.repository.exists(request.image_id, request.user_id):
            raise DuplicateResourceError("User has already liked this image", resource_type="image_like")

        like = await self.repository.create(
            ImageLikeModel(image_id=request.image_id, user_id=request.user_id, created_at=utc_now())
        )
        return to_response(like)

    async def toggle(self, image_id: UUID, user_id: UUID) -> bool:
        """Flip the user's like; ``True`` when the image is now liked."""
        existing = await self.repository.get_by_image_and_user(image_id, user_id)
        if existing is not None:
            await self.repository.delete(existing.id)
            return False

        await self.repository.create(ImageLikeModel(image_id=image_id, user_id=user_id, created_at=utc_now()))
        return True

    async def unlike(self, image_id: UUID, user_id: UUID) -> bool:
        return await self.repository.delete_by_image_and_user(image_id, user_id)

    async def delete(self, like_id: UUID) -> None:
        if not await self.repository.delete(like_id):
            raise NotFoundError(
                f"Image like not found with id: {like_id}",
                resource_type="image_like",
                resource_id=like_id,
            )
