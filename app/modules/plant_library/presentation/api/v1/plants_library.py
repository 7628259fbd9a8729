# 📄 File: app/modules/plant_library/presentation/api/v1/plants_library.py
# 🧭 Purpose (Layman Explanation):
# This file contains the web endpoints for the plant encyclopedia: browse, look up, add, edit, delete
# and search entries by keyword or by detailed filters.
#
# 🧪 Purpose (Technical Summary):
# FastAPI router for /plants-library with paged listings, CRUD, plain OR search and criteria-based
# advanced search. Every response uses the standard success envelope.
#
# 🔗 Dependencies:
# - FastAPI router, Query parameters, status codes
# - app.modules.plant_library.presentation.dependencies (service injection)
# - app.shared.core.responses (envelopes), app.shared.core.dependencies (paging)
#
# 🔄 Connected Modules / Calls From:
# - app.api.v1.router (mounted under /api/v1/plants-library)

"""
Plants Library API Endpoints

Endpoints:
- GET /: Paged list of entries
- GET /all: Every entry
- GET /search: Free-text search across names and growing attributes
- GET /search/advanced: All-of filter over the individual attributes
- GET /type/{plant_type}, /life-cycle/{life_cycle}, /medicinal: Paged lookups
- GET /{entry_id}, POST /, PUT /{entry_id}, DELETE /{entry_id}: CRUD
"""

import logging
from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status

from app.modules.plant_library.domain.repositories.plant_library_repository import PlantsLibrarySearchCriteria
from app.modules.plant_library.domain.services.plant_library_service import PlantLibraryService
from app.modules.plant_library.presentation.api.schemas.plant_library_schemas import (
    PlantsLibraryRequest,
    PlantsLibraryResponse,
)
from app.modules.plant_library.presentation.dependencies import get_plant_library_service
from app.shared.core.dependencies import page_request_with_default_sort
from app.shared.core.responses import ERROR_RESPONSES, ApiResponse, PageResponse, created, ok
from app.shared.infrastructure.database.search import PageRequest

logger = logging.getLogger(__name__)

plants_library_router = APIRouter()

# Library listings read alphabetically unless the caller asks otherwise
library_page_request = page_request_with_default_sort("common_name", "ASC")


@plants_library_router.get(
    "",
    response_model=ApiResponse[PageResponse[PlantsLibraryResponse]],
    summary="List plants library entries",
    description="Paged list of plants library entries, alphabetical by common name by default",
    responses=ERROR_RESPONSES,
)
async def get_all_plants(
    page_request: PageRequest = Depends(library_page_request),
    service: PlantLibraryService = Depends(get_plant_library_service),
):
    page = await service.find_all(page_request)
    return ok(PageResponse.from_page(page), "Successfully retrieved plants")


@plants_library_router.get(
    "/all",
    response_model=ApiResponse[List[PlantsLibraryResponse]],
    summary="List every plants library entry",
)
async def get_all_plants_without_pagination(
    service: PlantLibraryService = Depends(get_plant_library_service),
):
    return ok(await service.list_all(), "Successfully retrieved all plants")


@plants_library_router.get(
    "/search",
    response_model=ApiResponse[PageResponse[PlantsLibraryResponse]],
    summary="Search plants library",
    description=(
        "Case-insensitive keyword search across names, description, origin, type, climate, "
        "life cycle, watering, soil, sunlight, ideal place and care level. A blank query returns everything."
    ),
    responses=ERROR_RESPONSES,
)
async def search_plants(
    query: Optional[str] = Query(None, description="Search keyword"),
    page_request: PageRequest = Depends(library_page_request),
    service: PlantLibraryService = Depends(get_plant_library_service),
):
    page = await service.search(query, page_request)
    return ok(PageResponse.from_page(page), "Successfully searched plants")


@plants_library_router.get(
    "/search/advanced",
    response_model=ApiResponse[PageResponse[PlantsLibraryResponse]],
    summary="Advanced plants library search",
    description=(
        "Every supplied filter must match. Text filters are case-insensitive substring matches; "
        "time_to_harvest, flower, fruit and medicinal match exactly. The size attribute is filtered "
        "through `plant_size` because `size` is the page size parameter."
    ),
    responses=ERROR_RESPONSES,
)
async def search_plants_advanced(
    common_name: Optional[str] = Query(None),
    other_name: Optional[str] = Query(None),
    scientific_name: Optional[str] = Query(None),
    origin: Optional[str] = Query(None),
    plant_type: Optional[str] = Query(None),
    climate: Optional[str] = Query(None),
    life_cycle: Optional[str] = Query(None),
    watering_frequency: Optional[str] = Query(None),
    soil_type: Optional[str] = Query(None),
    plant_size: Optional[str] = Query(None, description="Filters the size attribute; `size` is the page size"),
    sunlight_requirement: Optional[str] = Query(None),
    growth_rate: Optional[str] = Query(None),
    ideal_place: Optional[str] = Query(None),
    care_level: Optional[str] = Query(None),
    best_planting_season: Optional[str] = Query(None),
    time_to_harvest: Optional[float] = Query(None),
    flower: Optional[bool] = Query(None),
    fruit: Optional[bool] = Query(None),
    medicinal: Optional[bool] = Query(None),
    page_request: PageRequest = Depends(library_page_request),
    service: PlantLibraryService = Depends(get_plant_library_service),
):
    criteria = PlantsLibrarySearchCriteria(
        common_name=common_name,
        other_name=other_name,
        scientific_name=scientific_name,
        origin=origin,
        plant_type=plant_type,
        climate=climate,
        life_cycle=life_cycle,
        watering_frequency=watering_frequency,
        soil_type=soil_type,
        size=plant_size,
        sunlight_requirement=sunlight_requirement,
        growth_rate=growth_rate,
        ideal_place=ideal_place,
        care_level=care_level,
        best_planting_season=best_planting_season,
        time_to_harvest=time_to_harvest,
        flower=flower,
        fruit=fruit,
        medicinal=medicinal,
    )
    page = await service.search_advanced(criteria, page_request)
    return ok(PageResponse.from_page(page), "Successfully searched plants")


@plants_library_router.get(
    "/type/{plant_type}",
    response_model=ApiResponse[PageResponse[PlantsLibraryResponse]],
    summary="Plants library entries by type",
)
async def get_plants_by_type(
    plant_type: str,
    page_request: PageRequest = Depends(library_page_request),
    service: PlantLibraryService = Depends(get_plant_library_service),
):
    page = await service.find_by_plant_type(plant_type, page_request)
    return ok(PageResponse.from_page(page), "Successfully retrieved plants by type")


@plants_library_router.get(
    "/life-cycle/{life_cycle}",
    response_model=ApiResponse[PageResponse[PlantsLibraryResponse]],
    summary="Plants library entries by life cycle",
)
async def get_plants_by_life_cycle(
    life_cycle: str,
    page_request: PageRequest = Depends(library_page_request),
    service: PlantLibraryService = Depends(get_plant_library_service),
):
    page = await service.find_by_life_cycle(life_cycle, page_request)
    return ok(PageResponse.from_page(page), "Successfully retrieved plants by life cycle")


@plants_library_router.get(
    "/medicinal",
    response_model=ApiResponse[PageResponse[PlantsLibraryResponse]],
    summary="Medicinal plants",
)
async def get_medicinal_plants(
    page_request: PageRequest = Depends(library_page_request),
    service: PlantLibraryService = Depends(get_plant_library_service),
):
    page = await service.find_medicinal(page_request)
    return ok(PageResponse.from_page(page), "Successfully retrieved medicinal plants")


@plants_library_router.get(
    "/{entry_id}",
    response_model=ApiResponse[PlantsLibraryResponse],
    summary="Get plants library entry",
    responses=ERROR_RESPONSES,
)
async def get_plant_by_id(
    entry_id: UUID,
    service: PlantLibraryService = Depends(get_plant_library_service),
):
    return ok(await service.get_by_id(entry_id), "Successfully retrieved plant")


@plants_library_router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=ApiResponse[PlantsLibraryResponse],
    summary="Create plants library entry",
    responses=ERROR_RESPONSES,
)
async def create_plant(
    request: PlantsLibraryRequest,
    service: PlantLibraryService = Depends(get_plant_library_service),
):
    return created(await service.create(request), "Plant created successfully")


@plants_library_router.put(
    "/{entry_id}",
    response_model=ApiResponse[PlantsLibraryResponse],
    summary="Replace plants library entry",
    responses=ERROR_RESPONSES,
)
async def update_plant(
    entry_id: UUID,
    request: PlantsLibraryRequest,
    service: PlantLibraryService = Depends(get_plant_library_service),
):
    return ok(await service.update(entry_id, request), "Plant updated successfully")


@plants_library_router.delete(
    "/{entry_id}",
    response_model=ApiResponse[None],
    summary="Delete plants library entry",
    responses=ERROR_RESPONSES,
)
async def delete_plant(
    entry_id: UUID,
    service: PlantLibraryService = Depends(get_plant_library_service),
):
    await service.delete(entry_id)
    return ok(None, "Plant deleted successfully")
