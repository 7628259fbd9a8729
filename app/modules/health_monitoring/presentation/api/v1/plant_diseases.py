# 📄 File: app/modules/health_monitoring/presentation/api/v1/plant_diseases.py
# 🧭 Purpose (Layman Explanation):
# Web endpoints listing plant diseases, all of them or those a particular plant is prone to.
#
# 🧪 Purpose (Technical Summary):
# FastAPI router for /plant-diseases (read-only).
#
# 🔗 Dependencies:
# - FastAPI router, app.modules.health_monitoring.presentation.dependencies
#
# 🔄 Connected Modules / Calls From:
# - app.api.v1.router (mounted under /api/v1/plant-diseases)

from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends

from app.modules.health_monitoring.domain.services.health_monitoring_service import HealthMonitoringService
from app.modules.health_monitoring.presentation.api.schemas.health_schemas import PlantDiseaseResponse
from app.modules.health_monitoring.presentation.dependencies import get_health_monitoring_service
from app.shared.core.responses import ERROR_RESPONSES, ApiResponse, ok

plant_diseases_router = APIRouter()


@plant_diseases_router.get("", response_model=ApiResponse[List[PlantDiseaseResponse]], summary="List plant diseases")
async def get_all_plant_diseases(service: HealthMonitoringService = Depends(get_health_monitoring_service)):
    return ok(await service.list_diseases(), "Successfully retrieved plant diseases")


@plant_diseases_router.get(
    "/plant-library/{plant_library_id}",
    response_model=ApiResponse[List[PlantDiseaseResponse]],
    summary="Diseases of a plants library entry",
    description="Diseases named in the entry's common diseases list. Unknown entries give an empty list.",
    responses=ERROR_RESPONSES,
)
async def get_diseases_by_plant_library(
    plant_library_id: UUID,
    service: HealthMonitoringService = Depends(get_health_monitoring_service),
):
    return ok(
        await service.diseases_for_library_entry(plant_library_id),
        "Successfully retrieved diseases for plant",
    )
