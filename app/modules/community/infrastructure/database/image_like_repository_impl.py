# 📄 File: app/modules/community/infrastructure/database/image_like_repository_impl.py
# 🧭 Purpose (Layman Explanation):
# Records who liked which garden photo, and makes sure nobody can like the same photo twice.
#
# 🧪 Purpose (Technical Summary):
# SQLAlchemy implementation of ImageLikeRepository. Inserts run inside a SAVEPOINT so a unique
# constraint violation on (image_id, user_id) surfaces as DuplicateResourceError without poisoning
# the request transaction.
#
# 🔗 Dependencies:
# SQLAlchemyRepository, ImageLikeModel, sqlalchemy.exc.IntegrityError
#
# 🔄 Connected Modules / Calls From:
# app.modules.community.presentation.dependencies

import logging
from typing import Optional
from uuid import UUID

from sqlalchemy import and_, delete, exists as sql_exists, select, true
from sqlalchemy.exc import IntegrityError

from app.modules.community.domain.repositories.image_like_repository import ImageLikeRepository
from app.modules.community.infrastructure.database.models import ImageLikeModel
from app.shared.core.exceptions import DuplicateResourceError
from app.shared.infrastructure.database.repository import SQLAlchemyRepository
from app.shared.infrastructure.database.search import Page, PageRequest

logger = logging.getLogger(__name__)


def _pair(image_id: UUID, user_id: UUID):
    return and_(ImageLikeModel.image_id == image_id, ImageLikeModel.user_id == user_id)


class ImageLikeRepositoryImpl(SQLAlchemyRepository, ImageLikeRepository):

    model = ImageLikeModel
    entity_name = "image like"

    async def find_all(self, page_request: PageRequest) -> Page:
        return await self._page(true(), page_request)

    async def get_by_id(self, like_id: UUID) -> Optional[ImageLikeModel]:
        return await self._get(like_id)

    async def find_by_image_id(self, image_id: UUID, page_request: PageRequest) -> Page:
        return await self._page(ImageLikeModel.image_id == image_id, page_request)

    async def get_by_image_and_user(self, image_id: UUID, user_id: UUID) -> Optional[ImageLikeModel]:
        async with self._translate_errors("retrieve"):
            result = await self._session.execute(select(ImageLikeModel).where(_pair(image_id, user_id)))
            return result.scalar_one_or_none()

    async def exists(self, image_id: UUID, user_id: UUID) -> bool:
        async with self._translate_errors("retrieve"):
            result = await self._session.execute(select(sql_exists().where(_pair(image_id, user_id))))
            return bool(result.scalar())

    async def count_by_image_id(self, image_id: UUID) -> int:
        return await self._count(ImageLikeModel.image_id == image_id)

    async def create(self, like: ImageLikeModel) -> ImageLikeModel:
        try:
            async with self._session.begin_nested():
                self._session.add(like)
                await self._session.flush()
        except IntegrityError as e:
            logger.info(f"Duplicate like rejected for image {like.image_id} by user {like.user_id}")
            raise DuplicateResourceError(
                "User has already liked this image",
                resource_type="image_like",
            ) from e

        logger.info(f"Created image like with ID: {like.id}")
        return like

    async def delete(self, like_id: UUID) -> bool:
        return await self._delete(like_id)

    async def delete_by_image_and_user(self, image_id: UUID, user_id: UUID) -> bool:
        async with self._translate_errors("delete"):
            result = await self._session.execute(delete(ImageLikeModel).where(_pair(image_id, user_id)))
        removed = result.rowcount > 0
        if removed:
            logger.info(f"Removed like on image {image_id} by user {user_id}")
        return removed
