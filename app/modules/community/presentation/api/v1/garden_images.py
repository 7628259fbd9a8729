# 📄 File: app/modules/community/presentation/api/v1/garden_images.py
# 🧭 Purpose (Layman Explanation):
# Web endpoints for garden photos: add, view, edit, delete, list per garden and search by title.
#
# 🧪 Purpose (Technical Summary):
# FastAPI router for /garden-images.
#
# 🔗 Dependencies:
# - FastAPI router, app.modules.community.presentation.dependencies
# - app.shared.core.responses, app.shared.core.dependencies
#
# 🔄 Connected Modules / Calls From:
# - app.api.v1.router (mounted under /api/v1/garden-images)

from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status

from app.modules.community.domain.services.garden_image_service import GardenImageService
from app.modules.community.presentation.api.schemas.community_schemas import (
    GardenImageRequest,
    GardenImageResponse,
)
from app.modules.community.presentation.dependencies import get_garden_image_service
from app.shared.core.dependencies import get_page_request
from app.shared.core.responses import ERROR_RESPONSES, ApiResponse, PageResponse, created, ok
from app.shared.infrastructure.database.search import PageRequest

garden_images_router = APIRouter()


@garden_images_router.get(
    "",
    response_model=ApiResponse[PageResponse[GardenImageResponse]],
    summary="List garden images",
    responses=ERROR_RESPONSES,
)
async def get_all_garden_images(
    page_request: PageRequest = Depends(get_page_request),
    service: GardenImageService = Depends(get_garden_image_service),
):
    page = await service.find_all(page_request)
    return ok(PageResponse.from_page(page), "Successfully retrieved garden images")


@garden_images_router.get("/all", response_model=ApiResponse[List[GardenImageResponse]], summary="List every garden image")
async def get_all_garden_images_without_pagination(
    service: GardenImageService = Depends(get_garden_image_service),
):
    return ok(await service.list_all(), "Successfully retrieved all garden images")


@garden_images_router.get(
    "/garden-plan/{garden_plan_id}",
    response_model=ApiResponse[PageResponse[GardenImageResponse]],
    summary="Images of a garden plan",
    responses=ERROR_RESPONSES,
)
async def get_garden_images_by_garden_plan(
    garden_plan_id: UUID,
    page_request: PageRequest = Depends(get_page_request),
    service: GardenImageService = Depends(get_garden_image_service),
):
    page = await service.find_by_garden_plan_id(garden_plan_id, page_request)
    return ok(PageResponse.from_page(page), "Successfully retrieved images for garden plan")


@garden_images_router.get(
    "/search",
    response_model=ApiResponse[PageResponse[GardenImageResponse]],
    summary="Search garden images by title",
    responses=ERROR_RESPONSES,
)
async def search_garden_images(
    title: Optional[str] = Query(None, description="Title keyword"),
    garden_plan_id: Optional[UUID] = Query(None),
    page_request: PageRequest = Depends(get_page_request),
    service: GardenImageService = Depends(get_garden_image_service),
):
    page = await service.search(title, garden_plan_id, page_request)
    return ok(PageResponse.from_page(page), "Successfully searched images by title")


@garden_images_router.get(
    "/{image_id}",
    response_model=ApiResponse[GardenImageResponse],
    summary="Get garden image",
    responses=ERROR_RESPONSES,
)
async def get_garden_image_by_id(image_id: UUID, service: GardenImageService = Depends(get_garden_image_service)):
    return ok(await service.get_by_id(image_id), "Successfully retrieved garden image")


@garden_images_router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=ApiResponse[GardenImageResponse],
    summary="Create garden image",
    responses=ERROR_RESPONSES,
)
async def create_garden_image(
    request: GardenImageRequest,
    service: GardenImageService = Depends(get_garden_image_service),
):
    return created(await service.create(request), "Garden image created successfully")


@garden_images_router.put(
    "/{image_id}",
    response_model=ApiResponse[GardenImageResponse],
    summary="Replace garden image",
    responses=ERROR_RESPONSES,
)
async def update_garden_image(
    image_id: UUID,
    request: GardenImageRequest,
    service: GardenImageService = Depends(get_garden_image_service),
):
    return ok(await service.update(image_id, request), "Garden image updated successfully")


@garden_images_router.delete(
    "/{image_id}",
    response_model=ApiResponse[None],
    summary="Delete garden image",
    responses=ERROR_RESPONSES,
)
async def delete_garden_image(image_id: UUID, service: GardenImageService = Depends(get_garden_image_service)):
    await service.delete(image_id)
    return ok(None, "Garden image deleted successfully")
