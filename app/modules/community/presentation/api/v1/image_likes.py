# 📄 File: app/modules/community/presentation/api/v1/image_likes.py
# 🧭 Purpose (Layman Explanation):
# Web endpoints for liking garden photos: like, unlike, toggle, check and count.
#
# 🧪 Purpose (Technical Summary):
# FastAPI router for /image-likes. POST answers 409 on a duplicate like; DELETE
# /image/{image_id}/user/{user_id} is idempotent and reports whether a like was removed.
#
# 🔗 Dependencies:
# - FastAPI router, app.modules.community.presentation.dependencies
# - app.shared.core.responses, app.shared.core.dependencies
#
# 🔄 Connected Modules / Calls From:
# - app.api.v1.router (mounted under /api/v1/image-likes)

from uuid import UUID

from fastapi import APIRouter, Depends, status

from app.modules.community.domain.services.image_like_service import ImageLikeService
from app.modules.community.presentation.api.schemas.community_schemas import (
    ImageLikeRequest,
    ImageLikeResponse,
)
from app.modules.community.presentation.dependencies import get_image_like_service
from app.shared.core.dependencies import get_page_request
from app.shared.core.responses import ERROR_RESPONSES, ApiResponse, ErrorResponse, PageResponse, created, ok
from app.shared.infrastructure.database.search import PageRequest

image_likes_router = APIRouter()


@image_likes_router.get(
    "",
    response_model=ApiResponse[PageResponse[ImageLikeResponse]],
    summary="List image likes",
    responses=ERROR_RESPONSES,
)
async def get_all_image_likes(
    page_request: PageRequest = Depends(get_page_request),
    service: ImageLikeService = Depends(get_image_like_service),
):
    page = await service.find_all(page_request)
    return ok(PageResponse.from_page(page), "Successfully retrieved image likes")


@image_likes_router.get(
    "/image/{image_id}",
    response_model=ApiResponse[PageResponse[ImageLikeResponse]],
    summary="Likes on an image",
    responses=ERROR_RESPONSES,
)
async def get_likes_by_image(
    image_id: UUID,
    page_request: PageRequest = Depends(get_page_request),
    service: ImageLikeService = Depends(get_image_like_service),
):
    page = await service.find_by_image_id(image_id, page_request)
    return ok(PageResponse.from_page(page), "Successfully retrieved likes for image")


@image_likes_router.get(
    "/image/{image_id}/count",
    response_model=ApiResponse[int],
    summary="Count likes on an image",
)
async def count_likes_by_image(image_id: UUID, service: ImageLikeService = Depends(get_image_like_service)):
    return ok(await service.count_by_image_id(image_id), "Successfully counted likes for image")


@image_likes_router.get(
    "/image/{image_id}/user/{user_id}",
    response_model=ApiResponse[bool],
    summary="Has the user liked the image",
)
async def has_user_liked_image(
    image_id: UUID,
    user_id: UUID,
    service: ImageLikeService = Depends(get_image_like_service),
):
    return ok(await service.has_user_liked(image_id, user_id), "Successfully checked if user liked image")


@image_likes_router.post(
    "/image/{image_id}/user/{user_id}/toggle",
    response_model=ApiResponse[bool],
    summary="Toggle a like",
    description="Returns true when the image is now liked, false when the like was removed.",
)
async def toggle_image_like(
    image_id: UUID,
    user_id: UUID,
    service: ImageLikeService = Depends(get_image_like_service),
):
    liked = await service.toggle(image_id, user_id)
    return ok(liked, "Image liked successfully" if liked else "Image unliked successfully")


@image_likes_router.delete(
    "/image/{image_id}/user/{user_id}",
    response_model=ApiResponse[bool],
    summary="Unlike an image",
    description="True when a like was removed, false when there was none.",
)
async def unlike_image(
    image_id: UUID,
    user_id: UUID,
    service: ImageLikeService = Depends(get_image_like_service),
):
    return ok(await service.unlike(image_id, user_id), "Image unliked successfully")


@image_likes_router.get(
    "/{like_id}",
    response_model=ApiResponse[ImageLikeResponse],
    summary="Get image like",
    responses=ERROR_RESPONSES,
)
async def get_image_like_by_id(like_id: UUID, service: ImageLikeService = Depends(get_image_like_service)):
    return ok(await service.get_by_id(like_id), "Successfully retrieved image like")


@image_likes_router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=ApiResponse[ImageLikeResponse],
    summary="Like an image",
    responses={
        **ERROR_RESPONSES,
        409: {"model": ErrorResponse, "description": "User has already liked this image"},
    },
)
async def create_image_like(request: ImageLikeRequest, service: ImageLikeService = Depends(get_image_like_service)):
    return created(await service.create(request), "Image like created successfully")


@image_likes_router.delete(
    "/{like_id}",
    response_model=ApiResponse[None],
    summary="Delete image like",
    responses=ERROR_RESPONSES,
)
async def delete_image_like(like_id: UUID, service: ImageLikeService = Depends(get_image_like_service)):
    await service.delete(like_id)
    return ok(None, "Image like deleted successfully")
