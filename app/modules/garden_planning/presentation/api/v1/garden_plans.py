# 📄 File: app/modules/garden_planning/presentation/api/v1/garden_plans.py
# 🧭 Purpose (Layman Explanation):
# Web endpoints for garden plans: create, view, edit and delete plans, see one gardener's plans or
# the public ones, and search them.
#
# 🧪 Purpose (Technical Summary):
# FastAPI router for /garden-plans. /search is the plain OR search; /search/advanced is the
# relevance-ranked search that silently falls back to the plain search.
#
# 🔗 Dependencies:
# - FastAPI router, Query parameters
# - app.modules.garden_planning.presentation.dependencies (service injection)
# - app.shared.core.responses, app.shared.core.dependencies
#
# 🔄 Connected Modules / Calls From:
# - app.api.v1.router (mounted under /api/v1/garden-plans)

import logging
from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status

from app.modules.garden_planning.domain.repositories.garden_plan_repository import GardenPlanSearchCriteria
from app.modules.garden_planning.domain.services.garden_plan_service import GardenPlanService
from app.modules.garden_planning.presentation.api.schemas.garden_plan_schemas import (
    GardenPlanRequest,
    GardenPlanResponse,
)
from app.modules.garden_planning.presentation.dependencies import get_garden_plan_service
from app.shared.core.dependencies import get_page_request
from app.shared.core.responses import ERROR_RESPONSES, ApiResponse, PageResponse, created, ok
from app.shared.infrastructure.database.search import PageRequest

logger = logging.getLogger(__name__)

garden_plans_router = APIRouter()

# =============================================================================
# LISTINGS
# =============================================================================


@garden_plans_router.get(
    "",
    response_model=ApiResponse[PageResponse[GardenPlanResponse]],
    summary="List garden plans",
    responses=ERROR_RESPONSES,
)
async def get_all_garden_plans(
    page_request: PageRequest = Depends(get_page_request),
    service: GardenPlanService = Depends(get_garden_plan_service),
):
    page = await service.find_all(page_request)
    return ok(PageResponse.from_page(page), "Successfully retrieved garden plans")


@garden_plans_router.get(
    "/all",
    response_model=ApiResponse[List[GardenPlanResponse]],
    summary="List every garden plan",
)
async def get_all_garden_plans_without_pagination(
    service: GardenPlanService = Depends(get_garden_plan_service),
):
    return ok(await service.list_all(), "Successfully retrieved all garden plans")


@garden_plans_router.get(
    "/user/{user_id}",
    response_model=ApiResponse[PageResponse[GardenPlanResponse]],
    summary="Garden plans of a user",
    responses=ERROR_RESPONSES,
)
async def get_garden_plans_by_user(
    user_id: UUID,
    page_request: PageRequest = Depends(get_page_request),
    service: GardenPlanService = Depends(get_garden_plan_service),
):
    page = await service.find_by_user_id(user_id, page_request)
    return ok(PageResponse.from_page(page), "Successfully retrieved garden plans for user")


@garden_plans_router.get(
    "/user/{user_id}/all",
    response_model=ApiResponse[List[GardenPlanResponse]],
    summary="Every garden plan of a user",
    responses=ERROR_RESPONSES,
)
async def get_all_garden_plans_by_user(
    user_id: UUID,
    service: GardenPlanService = Depends(get_garden_plan_service),
):
    return ok(await service.list_by_user_id(user_id), "Successfully retrieved all garden plans for user")


@garden_plans_router.get(
    "/public",
    response_model=ApiResponse[PageResponse[GardenPlanResponse]],
    summary="Public garden plans",
)
async def get_public_garden_plans(
    page_request: PageRequest = Depends(get_page_request),
    service: GardenPlanService = Depends(get_garden_plan_service),
):
    page = await service.find_public(page_request)
    return ok(PageResponse.from_page(page), "Successfully retrieved public garden plans")


@garden_plans_router.get(
    "/public/all",
    response_model=ApiResponse[List[GardenPlanResponse]],
    summary="Every public garden plan",
)
async def get_all_public_garden_plans(
    service: GardenPlanService = Depends(get_garden_plan_service),
):
    return ok(await service.list_public(), "Successfully retrieved all public garden plans")


# =============================================================================
# SEARCH
# =============================================================================


@garden_plans_router.get(
    "/search",
    response_model=ApiResponse[PageResponse[GardenPlanResponse]],
    summary="Search garden plans",
    description=(
        "Keyword search over name, description, type and location, optionally limited "
        "to one user and/or public plans. A blank query returns every plan in scope."
    ),
    responses=ERROR_RESPONSES,
)
async def search_garden_plans(
    query: Optional[str] = Query(None, description="Search keyword"),
    user_id: Optional[UUID] = Query(None),
    is_public: Optional[bool] = Query(None),
    page_request: PageRequest = Depends(get_page_request),
    service: GardenPlanService = Depends(get_garden_plan_service),
):
    page = await service.search(query, user_id, is_public, page_request)
    return ok(PageResponse.from_page(page), "Successfully searched garden plans")


@garden_plans_router.get(
    "/search/advanced",
    response_model=ApiResponse[PageResponse[GardenPlanResponse]],
    summary="Relevance search for garden plans",
    description=(
        "Closest matches first: exact name, then prefix, then substring. Falls back to the "
        "keyword search if ranking is unavailable."
    ),
    responses=ERROR_RESPONSES,
)
async def search_garden_plans_advanced(
    query: Optional[str] = Query(None),
    name: Optional[str] = Query(None),
    type: Optional[str] = Query(None),
    location: Optional[str] = Query(None),
    user_id: Optional[UUID] = Query(None),
    is_public: Optional[bool] = Query(None),
    page_request: PageRequest = Depends(get_page_request),
    service: GardenPlanService = Depends(get_garden_plan_service),
):
    criteria = GardenPlanSearchCriteria(
        query=query,
        name=name,
        type=type,
        location=location,
        user_id=user_id,
        is_public=is_public,
    )
    page = await service.search_advanced(criteria, page_request)
    return ok(PageResponse.from_page(page), "Successfully searched garden plans")


# =============================================================================
# CRUD
# =============================================================================


@garden_plans_router.get(
    "/{plan_id}",
    response_model=ApiResponse[GardenPlanResponse],
    summary="Get garden plan",
    responses=ERROR_RESPONSES,
)
async def get_garden_plan_by_id(
    plan_id: UUID,
    service: GardenPlanService = Depends(get_garden_plan_service),
):
    return ok(await service.get_by_id(plan_id), "Successfully retrieved garden plan")


@garden_plans_router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=ApiResponse[GardenPlanResponse],
    summary="Create garden plan",
    responses=ERROR_RESPONSES,
)
async def create_garden_plan(
    request: GardenPlanRequest,
    service: GardenPlanService = Depends(get_garden_plan_service),
):
    return created(await service.create(request), "Garden plan created successfully")


@garden_plans_router.put(
    "/{plan_id}",
    response_model=ApiResponse[GardenPlanResponse],
    summary="Replace garden plan",
    responses=ERROR_RESPONSES,
)
async def update_garden_plan(
    plan_id: UUID,
    request: GardenPlanRequest,
    service: GardenPlanService = Depends(get_garden_plan_service),
):
    return ok(await service.update(plan_id, request), "Garden plan updated successfully")


@garden_plans_router.delete(
    "/{plan_id}",
    response_model=ApiResponse[None],
    summary="Delete garden plan",
    responses=ERROR_RESPONSES,
)
async def delete_garden_plan(
    plan_id: UUID,
    service: GardenPlanService = Depends(get_garden_plan_service),
):
    await service.delete(plan_id)
    return ok(None, "Garden plan deleted successfully")
