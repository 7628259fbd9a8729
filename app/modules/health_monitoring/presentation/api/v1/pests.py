# 📄 File: app/modules/health_monitoring/presentation/api/v1/pests.py
# 🧭 Purpose (Layman Explanation):
# Web endpoints listing garden pests, all of them or those known to attack a particular plant.
#
# 🧪 Purpose (Technical Summary):
# FastAPI router for /pests (read-only).
#
# 🔗 Dependencies:
# - FastAPI router, app.modules.health_monitoring.presentation.dependencies
#
# 🔄 Connected Modules / Calls From:
# - app.api.v1.router (mounted under /api/v1/pests)

from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends

from app.modules.health_monitoring.domain.services.health_monitoring_service import HealthMonitoringService
from app.modules.health_monitoring.presentation.api.schemas.health_schemas import PestResponse
from app.modules.health_monitoring.presentation.dependencies import get_health_monitoring_service
from app.shared.core.responses import ERROR_RESPONSES, ApiResponse, ok

pests_router = APIRouter()


@pests_router.get("", response_model=ApiResponse[List[PestResponse]], summary="List pests")
async def get_all_pests(service: HealthMonitoringService = Depends(get_health_monitoring_service)):
    return ok(await service.list_pests(), "Successfully retrieved pests")


@pests_router.get(
    "/plant-library/{plant_library_id}",
    response_model=ApiResponse[List[PestResponse]],
    summary="Pests of a plants library entry",
    description="Pests named in the entry's common pests list. Unknown entries give an empty list.",
    responses=ERROR_RESPONSES,
)
async def get_pests_by_plant_library(
    plant_library_id: UUID,
    service: HealthMonitoringService = Depends(get_health_monitoring_service),
):
    return ok(await service.pests_for_library_entry(plant_library_id), "Successfully retrieved pests for plant")
