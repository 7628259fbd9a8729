# 📄 File: app/api/v1/router.py
# 🧭 Purpose (Layman Explanation):
# The traffic director for version 1 of the API: sends plant requests to the plant
# handlers, weather requests to the weather handlers and so on.
# 🧪 Purpose (Technical Summary):
# API v1 router aggregation. Mounts the health router and every module router under
# its resource prefix, plus a small info endpoint describing the mounted resources.
# 🔗 Dependencies:
# FastAPI, app.api.v1.health, app.modules.*.presentation.api.v1
# 🔄 Connected Modules / Calls From:
# app.main (mounted under /api/v1)

import logging

from fastapi import APIRouter

from . import API_V1_CONFIG, ROUTE_PREFIXES
from .health import health_router
from app.modules.activities.presentation.api.v1.activities import activities_router
from app.modules.ai_features.presentation.api.v1.plant_recommendations import plant_recommendations_router
from app.modules.care_management.presentation.api.v1.plant_reminders import plant_reminders_router
from app.modules.community.presentation.api.v1.garden_images import garden_images_router
from app.modules.community.presentation.api.v1.image_comments import image_comments_router
from app.modules.community.presentation.api.v1.image_likes import image_likes_router
from app.modules.garden_planning.presentation.api.v1.garden_plans import garden_plans_router
from app.modules.garden_planning.presentation.api.v1.plants import plants_router
from app.modules.health_monitoring.presentation.api.v1.pests import pests_router
from app.modules.health_monitoring.presentation.api.v1.plant_diseases import plant_diseases_router
from app.modules.plant_library.presentation.api.v1.external_plants import external_plants_router
from app.modules.plant_library.presentation.api.v1.plants_library import plants_library_router
from app.modules.user_management.presentation.api.v1.profiles import profiles_router
from app.modules.weather.presentation.api.v1.weather import weather_router
from app.shared.core.responses import ApiResponse, ok

logger = logging.getLogger(__name__)

# Create main API v1 router
api_v1_router = APIRouter()

# Health checks live at the root of the version prefix
api_v1_router.include_router(health_router, tags=["Health Check"])

# (router, route prefix key, OpenAPI tag)
MODULE_ROUTERS = [
    (plants_library_router, "plants_library", "Plants Library"),
    # before the plants router: /plants/{plant_id} would swallow /plants/external
    (external_plants_router, "plants_external", "External Plant Data"),
    (plants_router, "plants", "Plants"),
    (garden_plans_router, "garden_plans", "Garden Plans"),
    (profiles_router, "profiles", "Profiles"),
    (garden_images_router, "garden_images", "Garden Images"),
    (image_comments_router, "image_comments", "Image Comments"),
    (image_likes_router, "image_likes", "Image Likes"),
    (plant_reminders_router, "plant_reminders", "Plant Reminders"),
    (pests_router, "pests", "Pests"),
    (plant_diseases_router, "plant_diseases", "Plant Diseases"),
    (weather_router, "weather", "Weather"),
    (plant_recommendations_router, "plant_recommendations", "Plant Recommendations"),
    (activities_router, "activities", "Activities"),
]

for router, prefix_key, tag in MODULE_ROUTERS:
    api_v1_router.include_router(router, prefix=ROUTE_PREFIXES[prefix_key], tags=[tag])

logger.debug(f"API v1 mounted {len(MODULE_ROUTERS)} module routers")


@api_v1_router.get("/",
                   response_model=ApiResponse[dict],
                   summary="API v1 Information",
                   description="Version information and the resource prefixes served by API v1",
                   tags=["API Info"])
async def api_v1_info():
    return ok(
        {
            **API_V1_CONFIG,
            "resources": sorted(ROUTE_PREFIXES.values()),
            "documentation": {
                "openapi_schema": "/openapi.json",
                "swagger_ui": "/docs",
                "redoc": "/redoc",
            },
        },
        "API v1 information",
    )
