# 📄 File: app/modules/garden_planning/presentation/api/v1/plants.py
# 🧭 Purpose (Layman Explanation):
# Web endpoints for the plants inside garden plans, including copying a plant from the
# encyclopedia straight into a plan.
#
# 🧪 Purpose (Technical Summary):
# FastAPI router for /plants: paged listings, CRUD, per-plan and per-type lookups, plain OR
# search, relevance search with fallback and POST /from-library.
#
# 🔗 Dependencies:
# - FastAPI router, Query parameters
# - app.modules.garden_planning.presentation.dependencies
# - app.shared.core.responses, app.shared.core.dependencies
#
# 🔄 Connected Modules / Calls From:
# - app.api.v1.router (mounted under /api/v1/plants)

import logging
from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status

from app.modules.garden_planning.domain.repositories.plant_repository import PlantSearchCriteria
from app.modules.garden_planning.domain.services.add_plant_service import AddPlantService
from app.modules.garden_planning.domain.services.plant_service import PlantService
from app.modules.garden_planning.presentation.api.schemas.plant_schemas import (
    AddPlantFromLibraryRequest,
    PlantRequest,
    PlantResponse,
)
from app.modules.garden_planning.presentation.dependencies import get_add_plant_service, get_plant_service
from app.shared.core.dependencies import get_page_request
from app.shared.core.responses import ERROR_RESPONSES, ApiResponse, PageResponse, created, ok
from app.shared.infrastructure.database.search import PageRequest

logger = logging.getLogger(__name__)

plants_router = APIRouter()


@plants_router.get(
    "",
    response_model=ApiResponse[PageResponse[PlantResponse]],
    summary="List plants",
    responses=ERROR_RESPONSES,
)
async def get_all_plants(
    page_request: PageRequest = Depends(get_page_request),
    service: PlantService = Depends(get_plant_service),
):
    page = await service.find_all(page_request)
    return ok(PageResponse.from_page(page), "Successfully retrieved plants")


@plants_router.get("/all", response_model=ApiResponse[List[PlantResponse]], summary="List every plant")
async def get_all_plants_without_pagination(service: PlantService = Depends(get_plant_service)):
    return ok(await service.list_all(), "Successfully retrieved all plants")


@plants_router.get(
    "/search",
    response_model=ApiResponse[PageResponse[PlantResponse]],
    summary="Search plants",
    description=(
        "Keyword search over name, description, type, watering frequency and sunlight "
        "requirements, optionally within one garden plan."
    ),
    responses=ERROR_RESPONSES,
)
async def search_plants(
    query: Optional[str] = Query(None, description="Search keyword"),
    garden_plan_id: Optional[UUID] = Query(None),
    page_request: PageRequest = Depends(get_page_request),
    service: PlantService = Depends(get_plant_service),
):
    page = await service.search(query, garden_plan_id, page_request)
    return ok(PageResponse.from_page(page), "Successfully searched plants")


@plants_router.get(
    "/search/advanced",
    response_model=ApiResponse[PageResponse[PlantResponse]],
    summary="Relevance search for plants",
    description="Closest matches first; falls back to the keyword search if ranking is unavailable.",
    responses=ERROR_RESPONSES,
)
async def search_plants_advanced(
    query: Optional[str] = Query(None),
    name: Optional[str] = Query(None),
    type: Optional[str] = Query(None),
    watering_frequency: Optional[str] = Query(None),
    sunlight_requirements: Optional[str] = Query(None),
    garden_plan_id: Optional[UUID] = Query(None),
    page_request: PageRequest = Depends(get_page_request),
    service: PlantService = Depends(get_plant_service),
):
    criteria = PlantSearchCriteria(
        query=query,
        name=name,
        type=type,
        watering_frequency=watering_frequency,
        sunlight_requirements=sunlight_requirements,
        garden_plan_id=garden_plan_id,
    )
    page = await service.search_advanced(criteria, page_request)
    return ok(PageResponse.from_page(page), "Successfully searched plants")


@plants_router.get(
    "/garden-plan/{garden_plan_id}",
    response_model=ApiResponse[PageResponse[PlantResponse]],
    summary="Plants in a garden plan",
    responses=ERROR_RESPONSES,
)
async def get_plants_by_garden_plan(
    garden_plan_id: UUID,
    page_request: PageRequest = Depends(get_page_request),
    service: PlantService = Depends(get_plant_service),
):
    page = await service.find_by_garden_plan_id(garden_plan_id, page_request)
    return ok(PageResponse.from_page(page), "Successfully retrieved plants for garden plan")


@plants_router.get(
    "/garden-plan/{garden_plan_id}/all",
    response_model=ApiResponse[List[PlantResponse]],
    summary="Every plant in a garden plan",
    responses=ERROR_RESPONSES,
)
async def get_all_plants_by_garden_plan(
    garden_plan_id: UUID,
    service: PlantService = Depends(get_plant_service),
):
    return ok(await service.list_by_garden_plan_id(garden_plan_id), "Successfully retrieved all plants for garden plan")


@plants_router.get(
    "/type/{plant_type}",
    response_model=ApiResponse[PageResponse[PlantResponse]],
    summary="Plants by type",
)
async def get_plants_by_type(
    plant_type: str,
    page_request: PageRequest = Depends(get_page_request),
    service: PlantService = Depends(get_plant_service),
):
    page = await service.find_by_type(plant_type, page_request)
    return ok(PageResponse.from_page(page), "Successfully retrieved plants by type")


@plants_router.get(
    "/type/{plant_type}/all",
    response_model=ApiResponse[List[PlantResponse]],
    summary="Every plant of a type",
)
async def get_all_plants_by_type(
    plant_type: str,
    service: PlantService = Depends(get_plant_service),
):
    return ok(await service.list_by_type(plant_type), "Successfully retrieved all plants by type")


@plants_router.post(
    "/from-library",
    status_code=status.HTTP_201_CREATED,
    response_model=ApiResponse[PlantResponse],
    summary="Add a plants library entry to a garden plan",
    description="Copies the entry into the plan and places it on the first free cell of the 10x10 grid.",
    responses=ERROR_RESPONSES,
)
async def add_plant_from_library(
    request: AddPlantFromLibraryRequest,
    service: AddPlantService = Depends(get_add_plant_service),
):
    return created(await service.add_from_library(request), "Plant added successfully")


@plants_router.get(
    "/{plant_id}",
    response_model=ApiResponse[PlantResponse],
    summary="Get plant",
    responses=ERROR_RESPONSES,
)
async def get_plant_by_id(plant_id: UUID, service: PlantService = Depends(get_plant_service)):
    return ok(await service.get_by_id(plant_id), "Successfully retrieved plant")


@plants_router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=ApiResponse[PlantResponse],
    summary="Create plant",
    responses=ERROR_RESPONSES,
)
async def create_plant(request: PlantRequest, service: PlantService = Depends(get_plant_service)):
    return created(await service.create(request), "Plant created successfully")


@plants_router.put(
    "/{plant_id}",
    response_model=ApiResponse[PlantResponse],
    summary="Replace plant",
    responses=ERROR_RESPONSES,
)
async def update_plant(
    plant_id: UUID,
    request: PlantRequest,
    service: PlantService = Depends(get_plant_service),
):
    return ok(await service.update(plant_id, request), "Plant updated successfully")


@plants_router.delete(
    "/{plant_id}",
    response_model=ApiResponse[None],
    summary="Delete plant",
    responses=ERROR_RESPONSES,
)
async def delete_plant(plant_id: UUID, service: PlantService = Depends(get_plant_service)):
    await service.delete(plant_id)
    return ok(None, "Plant deleted successfully")
