# 📄 File: app/modules/activities/presentation/api/v1/activities.py
# 🧭 Purpose (Layman Explanation):
# Web endpoints for the activity feed: list what happened, record new entries, fix or remove them.
#
# 🧪 Purpose (Technical Summary):
# FastAPI router for /activities. Listings are newest first unless told otherwise; type filters
# match the activity type exactly.
#
# 🔗 Dependencies:
# - FastAPI router
# - app.modules.activities.presentation.dependencies
# - app.shared.core.responses, app.shared.core.dependencies
#
# 🔄 Connected Modules / Calls From:
# - app.api.v1.router (mounted under /api/v1/activities)

from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, status

from app.modules.activities.domain.services.activity_service import ActivityService
from app.modules.activities.presentation.api.schemas.activity_schemas import ActivityRequest, ActivityResponse
from app.modules.activities.presentation.dependencies import get_activity_service
from app.shared.core.dependencies import get_page_request
from app.shared.core.responses import ERROR_RESPONSES, ApiResponse, PageResponse, created, ok
from app.shared.infrastructure.database.search import PageRequest

activities_router = APIRouter()


@activities_router.get(
    "",
    response_model=ApiResponse[PageResponse[ActivityResponse]],
    summary="List activities",
    responses=ERROR_RESPONSES,
)
async def get_all_activities(
    page_request: PageRequest = Depends(get_page_request),
    service: ActivityService = Depends(get_activity_service),
):
    page = await service.find_all(page_request)
    return ok(PageResponse.from_page(page), "Successfully retrieved activities")


@activities_router.get(
    "/all",
    response_model=ApiResponse[List[ActivityResponse]],
    summary="List every activity",
)
async def get_all_activities_without_pagination(
    service: ActivityService = Depends(get_activity_service),
):
    return ok(await service.list_all(), "Successfully retrieved all activities")


@activities_router.get(
    "/user/{user_id}",
    response_model=ApiResponse[PageResponse[ActivityResponse]],
    summary="Activities of a user",
    responses=ERROR_RESPONSES,
)
async def get_activities_by_user(
    user_id: UUID,
    page_request: PageRequest = Depends(get_page_request),
    service: ActivityService = Depends(get_activity_service),
):
    page = await service.find_by_user_id(user_id, page_request)
    return ok(PageResponse.from_page(page), "Successfully retrieved activities for user")


@activities_router.get(
    "/user/{user_id}/type/{activity_type}",
    response_model=ApiResponse[PageResponse[ActivityResponse]],
    summary="Activities of a user by type",
    responses=ERROR_RESPONSES,
)
async def get_activities_by_user_and_type(
    user_id: UUID,
    activity_type: str,
    page_request: PageRequest = Depends(get_page_request),
    service: ActivityService = Depends(get_activity_service),
):
    page = await service.find_by_user_id_and_type(user_id, activity_type, page_request)
    return ok(PageResponse.from_page(page), "Successfully retrieved activities for user and type")


@activities_router.get(
    "/garden-plan/{garden_plan_id}",
    response_model=ApiResponse[PageResponse[ActivityResponse]],
    summary="Activities of a garden plan",
    responses=ERROR_RESPONSES,
)
async def get_activities_by_garden_plan(
    garden_plan_id: UUID,
    page_request: PageRequest = Depends(get_page_request),
    service: ActivityService = Depends(get_activity_service),
):
    page = await service.find_by_garden_plan_id(garden_plan_id, page_request)
    return ok(PageResponse.from_page(page), "Successfully retrieved activities for garden plan")


@activities_router.get(
    "/garden-plan/{garden_plan_id}/type/{activity_type}",
    response_model=ApiResponse[PageResponse[ActivityResponse]],
    summary="Activities of a garden plan by type",
    responses=ERROR_RESPONSES,
)
async def get_activities_by_garden_plan_and_type(
    garden_plan_id: UUID,
    activity_type: str,
    page_request: PageRequest = Depends(get_page_request),
    service: ActivityService = Depends(get_activity_service),
):
    page = await service.find_by_garden_plan_id_and_type(garden_plan_id, activity_type, page_request)
    return ok(PageResponse.from_page(page), "Successfully retrieved activities for garden plan and type")


@activities_router.get(
    "/{activity_id}",
    response_model=ApiResponse[ActivityResponse],
    summary="Get activity",
    responses=ERROR_RESPONSES,
)
async def get_activity_by_id(
    activity_id: UUID,
    service: ActivityService = Depends(get_activity_service),
):
    return ok(await service.get_by_id(activity_id), "Successfully retrieved activity")


@activities_router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=ApiResponse[ActivityResponse],
    summary="Record activity",
    responses=ERROR_RESPONSES,
)
async def create_activity(
    request: ActivityRequest,
    service: ActivityService = Depends(get_activity_service),
):
    return created(await service.create(request), "Activity created successfully")


@activities_router.put(
    "/{activity_id}",
    response_model=ApiResponse[ActivityResponse],
    summary="Replace activity",
    responses=ERROR_RESPONSES,
)
async def update_activity(
    activity_id: UUID,
    request: ActivityRequest,
    service: ActivityService = Depends(get_activity_service),
):
    return ok(await service.update(activity_id, request), "Activity updated successfully")


@activities_router.delete(
    "/{activity_id}",
    response_model=ApiResponse[None],
    summary="Delete activity",
    responses=ERROR_RESPONSES,
)
async def delete_activity(
    activity_id: UUID,
    service: ActivityService = Depends(get_activity_service),
):
    await service.delete(activity_id)
    return ok(None, "Activity deleted successfully")
