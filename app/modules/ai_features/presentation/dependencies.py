# 📄 File: app/modules/ai_features/presentation/dependencies.py
# 🧭 Purpose (Layman Explanation):
# Connects a recommendation request to OpenAI and Unsplash for as long as the request lasts.
# 🧪 Purpose (Technical Summary):
# Request-scoped OpenAI and Unsplash clients (aiohttp sessions closed after the
# response) and the PlantRecommendationService built on them.
# 🔗 Dependencies:
# FastAPI Depends, app.shared.config.settings
# 🔄 Connected Modules / Calls From:
# app.modules.ai_features.presentation.api.v1.plant_recommendations

from typing import AsyncIterator

from fastapi import Depends

from app.modules.ai_features.domain.services.plant_recommendation_service import PlantRecommendationService
from app.modules.ai_features.infrastructure.external.openai_client import OpenAIClient
from app.modules.ai_features.infrastructure.external.unsplash_client import UnsplashClient


async def get_openai_client() -> AsyncIterator[OpenAIClient]:
    async with OpenAIClient.from_settings() as client:
        yield client


async def get_unsplash_client() -> AsyncIterator[UnsplashClient]:
    async with UnsplashClient.from_settings() as client:
        yield client


def get_plant_recommendation_service(
    openai_client: OpenAIClient = Depends(get_openai_client),
    unsplash_client: UnsplashClient = Depends(get_unsplash_client),
) -> PlantRecommendationService:
    return PlantRecommendationService(openai_client, unsplash_client)
