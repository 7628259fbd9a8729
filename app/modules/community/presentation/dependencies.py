# 📄 File: app/modules/community/presentation/dependencies.py
# 🧭 Purpose (Layman Explanation):
# Gives each photo, comment and like request the database helpers and services it needs.
# 🧪 Purpose (Technical Summary):
# FastAPI dependency providers for community repositories and services.
# 🔗 Dependencies:
# FastAPI Depends, app.shared.infrastructure.database.session
# 🔄 Connected Modules / Calls From:
# app.modules.community.presentation.api.v1.*

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.modules.community.domain.repositories.garden_image_repository import GardenImageRepository
from app.modules.community.domain.repositories.image_comment_repository import ImageCommentRepository
from app.modules.community.domain.repositories.image_like_repository import ImageLikeRepository
from app.modules.community.domain.services.garden_image_service import GardenImageService
from app.modules.community.domain.services.image_comment_service import ImageCommentService
from app.modules.community.domain.services.image_like_service import ImageLikeService
from app.modules.community.infrastructure.database.garden_image_repository_impl import (
    GardenImageRepositoryImpl,
)
from app.modules.community.infrastructure.database.image_comment_repository_impl import (
    ImageCommentRepositoryImpl,
)
from app.modules.community.infrastructure.database.image_like_repository_impl import ImageLikeRepositoryImpl
from app.shared.infrastructure.database.session import get_db_session


def get_garden_image_repository(session: AsyncSession = Depends(get_db_session)) -> GardenImageRepository:
    return GardenImageRepositoryImpl(session)


def get_image_comment_repository(session: AsyncSession = Depends(get_db_session)) -> ImageCommentRepository:
    return ImageCommentRepositoryImpl(session)


def get_image_like_repository(session: AsyncSession = Depends(get_db_session)) -> ImageLikeRepository:
    return ImageLikeRepositoryImpl(session)


def get_garden_image_service(
    repository: GardenImageRepository = Depends(get_garden_image_repository),
) -> GardenImageService:
    return GardenImageService(repository)


def get_image_comment_service(
    repository: ImageCommentRepository = Depends(get_image_comment_repository),
) -> ImageCommentService:
    return ImageCommentService(repository)


def get_image_like_service(
    repository: ImageLikeRepository = Depends(get_image_like_repository),
) -> ImageLikeService:
    return ImageLikeService(repository)
