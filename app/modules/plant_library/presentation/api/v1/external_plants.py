# 📄 File: app/modules/plant_library/presentation/api/v1/external_plants.py
# 🧭 Purpose (Layman Explanation):
# Web endpoints that search the online plant encyclopedia: plant lists, one plant's
# full profile and the pest and disease catalogue.
#
# 🧪 Purpose (Technical Summary):
# FastAPI router for /plants/external, backed by the Perenual API. Filter values are
# checked here (enumerations, hardiness zone 1-13, page >= 1) before any call goes out.
# Mounted ahead of the garden plants router so /plants/{plant_id} does not shadow it.
#
# 🔗 Dependencies:
# - FastAPI router, Query parameters
# - app.modules.plant_library.presentation.dependencies
#
# 🔄 Connected Modules / Calls From:
# - app.api.v1.router (mounted under /api/v1/plants/external)

from typing import Optional

from fastapi import APIRouter, Depends, Path, Query

from app.modules.plant_library.domain.services.external_plant_service import ExternalPlantService
from app.modules.plant_library.presentation.api.schemas.external_plant_schemas import (
    Cycle,
    DiseasePestFilters,
    DiseasePestPage,
    ExternalPlantDetails,
    ExternalPlantFilters,
    ExternalPlantPage,
    Order,
    Sunlight,
    Watering,
)
from app.modules.plant_library.presentation.dependencies import get_external_plant_service
from app.shared.core.responses import ERROR_RESPONSES, ApiResponse, ok

external_plants_router = APIRouter()


@external_plants_router.get(
    "",
    response_model=ApiResponse[ExternalPlantPage],
    summary="Search plants in the external plant database",
    responses=ERROR_RESPONSES,
)
async def get_external_plants(
    page: int = Query(1, ge=1),
    order: Optional[Order] = Query(None),
    cycle: Optional[Cycle] = Query(None),
    watering: Optional[Watering] = Query(None),
    sunlight: Optional[Sunlight] = Query(None),
    hardiness: Optional[int] = Query(None, ge=1, le=13, description="USDA hardiness zone"),
    edible: Optional[bool] = Query(None),
    poisonous: Optional[bool] = Query(None),
    indoor: Optional[bool] = Query(None),
    q: Optional[str] = Query(None, max_length=100, description="Plant name search"),
    service: ExternalPlantService = Depends(get_external_plant_service),
):
    filters = ExternalPlantFilters(
        page=page,
        order=order,
        cycle=cycle,
        watering=watering,
        sunlight=sunlight,
        hardiness=hardiness,
        edible=edible,
        poisonous=poisonous,
        indoor=indoor,
        q=q,
    )
    return ok(await service.get_plant_list(filters), "Successfully retrieved plants from external API")


@external_plants_router.get(
    "/diseases-pests",
    response_model=ApiResponse[DiseasePestPage],
    summary="Search plant diseases and pests in the external plant database",
    responses=ERROR_RESPONSES,
)
async def get_external_diseases_and_pests(
    id: Optional[int] = Query(None, ge=1),
    page: int = Query(1, ge=1),
    q: Optional[str] = Query(None, max_length=100),
    service: ExternalPlantService = Depends(get_external_plant_service),
):
    return ok(
        await service.get_disease_pest_list(DiseasePestFilters(id=id, page=page, q=q)),
        "Successfully retrieved diseases and pests from external API",
    )


@external_plants_router.get(
    "/{plant_id}",
    response_model=ApiResponse[ExternalPlantDetails],
    summary="Plant details from the external plant database",
    responses=ERROR_RESPONSES,
)
async def get_external_plant_details(
    plant_id: int = Path(..., ge=1),
    service: ExternalPlantService = Depends(get_external_plant_service),
):
    return ok(
        await service.get_plant_details(plant_id),
        "Successfully retrieved plant details from external API",
    )
