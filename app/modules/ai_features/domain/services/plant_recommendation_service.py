# 📄 File: app/modules/ai_features/domain/services/plant_recommendation_service.py
# 🧭 Purpose (Layman Explanation):
# The garden assistant itself: describes the user's garden to the AI, reads back
# its plant suggestions and adds a photo to each one.
#
# 🧪 Purpose (Technical Summary):
# Plant recommendation workflow: season resolution, prompt assembly, OpenAI
# chat completion, tolerant parsing and concurrent Unsplash image lookup.
# Provider and parsing failures are reported in-band (success=false with an
# error summary) rather than raised; image lookups never fail the request.
#
# 🔗 Dependencies:
# - OpenAIClient, UnsplashClient
# - prompt_builder, recommendation_parser
#
# 🔄 Connected Modules / Calls From:
# - app.modules.ai_features.presentation.api.v1.plant_recommendations

import asyncio
import logging
from typing import Optional

from app.modules.ai_features.domain.services.prompt_builder import (
    UNKNOWN_LOCATION,
    build_system_prompt,
    build_user_prompt,
    current_season,
)
from app.modules.ai_features.domain.services.recommendation_parser import (
    RecommendationParseError,
    parse_recommendations,
)
from app.modules.ai_features.infrastructure.external.openai_client import OpenAIClient
from app.modules.ai_features.infrastructure.external.unsplash_client import UnsplashClient
from app.modules.ai_features.presentation.api.schemas.recommendation_schemas import (
    PlantRecommendation,
    PlantRecommendationRequest,
    PlantRecommendationResponse,
    RecommendationMeta,
)
from app.shared.core.exceptions import ExternalAPIError

logger = logging.getLogger(__name__)


class PlantRecommendationService:

    def __init__(self, openai_client: OpenAIClient, unsplash_client: Optional[UnsplashClient] = None):
        self.openai_client = openai_client
        self.unsplash_client = unsplash_client

    async def get_recommendations(self, request: PlantRecommendationRequest) -> PlantRecommendationResponse:
        location = request.location or UNKNOWN_LOCATION
        season = request.season or current_season(request.location)
        logger.info(
            f"Getting plant recommendations for {request.garden_type} garden "
            f"(location: {location}, season: {season}, existing plants: {len(request.existing_plants)})"
        )

        if not self.openai_client.is_configured:
            logger.error("OpenAI API key is not configured")
            return PlantRecommendationResponse(success=False, error="Plant recommendations are not available")

        try:
            content = await self.openai_client.chat_completion(
                build_system_prompt(season),
                build_user_prompt(request, season),
            )
            recommendations = parse_recommendations(content)
        except ExternalAPIError as e:
            logger.error(f"OpenAI API error: {e.message}", exc_info=True)
            return PlantRecommendationResponse(success=False, error="Error calling OpenAI API")
        except RecommendationParseError as e:
            logger.error(f"Could not parse plant recommendations: {e}")
            return PlantRecommendationResponse(
                success=False,
                error="Error generating recommendations: the assistant returned an unreadable answer",
            )

        await asyncio.gather(*(self._attach_image(r) for r in recommendations))

        logger.info(f"Generated {len(recommendations)} plant recommendations")
        return PlantRecommendationResponse(
            success=True,
            recommendations=recommendations,
            meta=RecommendationMeta(season=season, location=location, garden_type=request.garden_type),
        )

    async def _attach_image(self, recommendation: PlantRecommendation) -> None:
        if self.unsplash_client is None or not self.unsplash_client.is_configured:
            return
        try:
            image_url = await self.unsplash_client.search_photo(f"{recommendation.name} plant")
        except ExternalAPIError as e:
            logger.error(f"Error fetching image for {recommendation.name}: {e.message}")
            return

        if image_url:
            recommendation.image_url = image_url
        else:
            logger.info(f"No image found for {recommendation.name}")
