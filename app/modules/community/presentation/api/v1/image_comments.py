# 📄 File: app/modules/community/presentation/api/v1/image_comments.py
# 🧭 Purpose (Layman Explanation):
# Web endpoints for comments on garden photos.
#
# 🧪 Purpose (Technical Summary):
# FastAPI router for /image-comments: paged listings per image or user, counts and CRUD.
#
# 🔗 Dependencies:
# - FastAPI router, app.modules.community.presentation.dependencies
# - app.shared.core.responses, app.shared.core.dependencies
#
# 🔄 Connected Modules / Calls From:
# - app.api.v1.router (mounted under /api/v1/image-comments)

from uuid import UUID

from fastapi import APIRouter, Depends, status

from app.modules.community.domain.services.image_comment_service import ImageCommentService
from app.modules.community.presentation.api.schemas.community_schemas import (
    ImageCommentRequest,
    ImageCommentResponse,
)
from app.modules.community.presentation.dependencies import get_image_comment_service
from app.shared.core.dependencies import get_page_request
from app.shared.core.responses import ERROR_RESPONSES, ApiResponse, PageResponse, created, ok
from app.shared.infrastructure.database.search import PageRequest

image_comments_router = APIRouter()


@image_comments_router.get(
    "",
    response_model=ApiResponse[PageResponse[ImageCommentResponse]],
    summary="List image comments",
    responses=ERROR_RESPONSES,
)
async def get_all_image_comments(
    page_request: PageRequest = Depends(get_page_request),
    service: ImageCommentService = Depends(get_image_comment_service),
):
    page = await service.find_all(page_request)
    return ok(PageResponse.from_page(page), "Successfully retrieved image comments")


@image_comments_router.get(
    "/image/{image_id}",
    response_model=ApiResponse[PageResponse[ImageCommentResponse]],
    summary="Comments on an image",
    responses=ERROR_RESPONSES,
)
async def get_comments_by_image(
    image_id: UUID,
    page_request: PageRequest = Depends(get_page_request),
    service: ImageCommentService = Depends(get_image_comment_service),
):
    page = await service.find_by_image_id(image_id, page_request)
    return ok(PageResponse.from_page(page), "Successfully retrieved comments for image")


@image_comments_router.get(
    "/image/{image_id}/count",
    response_model=ApiResponse[int],
    summary="Count comments on an image",
)
async def count_comments_by_image(
    image_id: UUID,
    service: ImageCommentService = Depends(get_image_comment_service),
):
    return ok(await service.count_by_image_id(image_id), "Successfully counted comments for image")


@image_comments_router.get(
    "/user/{user_id}",
    response_model=ApiResponse[PageResponse[ImageCommentResponse]],
    summary="Comments by a user",
    responses=ERROR_RESPONSES,
)
async def get_comments_by_user(
    user_id: UUID,
    page_request: PageRequest = Depends(get_page_request),
    service: ImageCommentService = Depends(get_image_comment_service),
):
    page = await service.find_by_user_id(user_id, page_request)
    return ok(PageResponse.from_page(page), "Successfully retrieved comments by user")


@image_comments_router.get(
    "/{comment_id}",
    response_model=ApiResponse[ImageCommentResponse],
    summary="Get image comment",
    responses=ERROR_RESPONSES,
)
async def get_image_comment_by_id(
    comment_id: UUID,
    service: ImageCommentService = Depends(get_image_comment_service),
):
    return ok(await service.get_by_id(comment_id), "Successfully retrieved image comment")


@image_comments_router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=ApiResponse[ImageCommentResponse],
    summary="Comment on an image",
    responses=ERROR_RESPONSES,
)
async def create_image_comment(
    request: ImageCommentRequest,
    service: ImageCommentService = Depends(get_image_comment_service),
):
    return created(await service.create(request), "Image comment created successfully")


@image_comments_router.put(
    "/{comment_id}",
    response_model=ApiResponse[ImageCommentResponse],
    summary="Edit image comment",
    responses=ERROR_RESPONSES,
)
async def update_image_comment(
    comment_id: UUID,
    request: ImageCommentRequest,
    service: ImageCommentService = Depends(get_image_comment_service),
):
    return ok(await service.update(comment_id, request), "Image comment updated successfully")


@image_comments_router.delete(
    "/{comment_id}",
    response_model=ApiResponse[None],
    summary="Delete image comment",
    responses=ERROR_RESPONSES,
)
async def delete_image_comment(
    comment_id: UUID,
    service: ImageCommentService = Depends(get_image_comment_service),
):
    await service.delete(comment_id)
    return ok(None, "Image comment deleted successfully")
