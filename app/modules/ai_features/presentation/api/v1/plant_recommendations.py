# 📄 File: app/modules/ai_features/presentation/api/v1/plant_recommendations.py
# 🧭 Purpose (Layman Explanation):
# The web endpoint where users describe their garden and get plant suggestions back.
#
# 🧪 Purpose (Technical Summary):
# FastAPI router for /plant-recommendations. Missing garden type or message is a 400;
# provider failures come back as a 200 envelope whose data has success=false.
#
# 🔗 Dependencies:
# - FastAPI router, app.modules.ai_features.presentation.dependencies
#
# 🔄 Connected Modules / Calls From:
# - app.api.v1.router (mounted under /api/v1/plant-recommendations)

import logging

from fastapi import APIRouter, Depends

from app.modules.ai_features.domain.services.plant_recommendation_service import PlantRecommendationService
from app.modules.ai_features.presentation.api.schemas.recommendation_schemas import (
    PlantRecommendationRequest,
    PlantRecommendationResponse,
)
from app.modules.ai_features.presentation.dependencies import get_plant_recommendation_service
from app.shared.core.responses import ERROR_RESPONSES, ApiResponse, ok

logger = logging.getLogger(__name__)

plant_recommendations_router = APIRouter()


@plant_recommendations_router.post(
    "",
    response_model=ApiResponse[PlantRecommendationResponse],
    summary="Get plant recommendations",
    description="Asks the gardening assistant for 3-5 plants suited to the described garden and season.",
    responses=ERROR_RESPONSES,
)
async def get_plant_recommendations(
    request: PlantRecommendationRequest,
    service: PlantRecommendationService = Depends(get_plant_recommendation_service),
):
    result = await service.get_recommendations(request)
    if not result.success:
        logger.warning(f"Plant recommendations failed: {result.error}")
        return ok(result, "Plant recommendations could not be generated")
    return ok(result, "Plant recommendations retrieved successfully")
