# 📄 File: app/modules/weather/presentation/api/v1/weather.py
# 🧭 Purpose (Layman Explanation):
# Web endpoints for the garden's weather: what it is like now, what is coming,
# what it means for the garden and which plant hazards to watch for.
#
# 🧪 Purpose (Technical Summary):
# FastAPI router for /weather. Every endpoint comes in a place-name flavour and
# a /coordinates flavour (lat, lon). Forecast days are limited to 1..7 here; the
# client itself tolerates 1..14.
#
# 🔗 Dependencies:
# - FastAPI router, Query parameters
# - app.modules.weather.presentation.dependencies
#
# 🔄 Connected Modules / Calls From:
# - app.api.v1.router (mounted under /api/v1/weather)

from typing import Annotated, Optional

from fastapi import APIRouter, Depends, Query

from app.modules.weather.domain.services.weather_service import WeatherService
from app.modules.weather.presentation.api.schemas.weather_schemas import WeatherReport
from app.modules.weather.presentation.dependencies import get_weather_service
from app.shared.core.responses import ERROR_RESPONSES, ApiResponse, ok

weather_router = APIRouter()

Location = Annotated[str, Query(max_length=100, description="Place name, e.g. 'London' or 'Kandy, Sri Lanka'")]
Latitude = Annotated[float, Query(ge=-90, le=90, description="Latitude in decimal degrees")]
Longitude = Annotated[float, Query(ge=-180, le=180, description="Longitude in decimal degrees")]
Days = Annotated[int, Query(ge=1, le=7, description="Forecast days (1-7)")]
GardenPlanId = Annotated[Optional[str], Query(alias="gardenPlanId", description="Garden plan the report is for")]


@weather_router.get(
    "/current",
    response_model=ApiResponse[WeatherReport],
    summary="Current weather",
    responses=ERROR_RESPONSES,
)
async def get_current_weather(
    location: Location,
    service: WeatherService = Depends(get_weather_service),
):
    return ok(await service.get_current_weather(location), "Successfully retrieved current weather")


@weather_router.get(
    "/current/coordinates",
    response_model=ApiResponse[WeatherReport],
    summary="Current weather by coordinates",
    responses=ERROR_RESPONSES,
)
async def get_current_weather_by_coordinates(
    lat: Latitude,
    lon: Longitude,
    service: WeatherService = Depends(get_weather_service),
):
    return ok(
        await service.get_current_weather_by_coordinates(lat, lon),
        "Successfully retrieved current weather",
    )


@weather_router.get(
    "/forecast",
    response_model=ApiResponse[WeatherReport],
    summary="Weather forecast",
    responses=ERROR_RESPONSES,
)
async def get_weather_forecast(
    location: Location,
    days: Days = 3,
    service: WeatherService = Depends(get_weather_service),
):
    return ok(await service.get_weather_forecast(location, days), "Successfully retrieved weather forecast")


@weather_router.get(
    "/forecast/coordinates",
    response_model=ApiResponse[WeatherReport],
    summary="Weather forecast by coordinates",
    responses=ERROR_RESPONSES,
)
async def get_weather_forecast_by_coordinates(
    lat: Latitude,
    lon: Longitude,
    days: Days = 3,
    service: WeatherService = Depends(get_weather_service),
):
    return ok(
        await service.get_weather_forecast_by_coordinates(lat, lon, days),
        "Successfully retrieved weather forecast",
    )


@weather_router.get(
    "/garden",
    response_model=ApiResponse[WeatherReport],
    summary="Garden weather",
    description="Short forecast with plant hazards and a line of gardening advice.",
    responses=ERROR_RESPONSES,
)
async def get_garden_weather(
    location: Location,
    garden_plan_id: GardenPlanId = None,
    service: WeatherService = Depends(get_weather_service),
):
    return ok(
        await service.get_garden_weather(location, garden_plan_id),
        "Successfully retrieved garden weather information",
    )


@weather_router.get(
    "/garden/coordinates",
    response_model=ApiResponse[WeatherReport],
    summary="Garden weather by coordinates",
    responses=ERROR_RESPONSES,
)
async def get_garden_weather_by_coordinates(
    lat: Latitude,
    lon: Longitude,
    garden_plan_id: GardenPlanId = None,
    service: WeatherService = Depends(get_weather_service),
):
    return ok(
        await service.get_garden_weather_by_coordinates(lat, lon, garden_plan_id),
        "Successfully retrieved garden weather information",
    )


@weather_router.get(
    "/hazards",
    response_model=ApiResponse[WeatherReport],
    summary="Plant hazards for current weather",
    responses=ERROR_RESPONSES,
)
async def get_weather_hazards(
    location: Location,
    service: WeatherService = Depends(get_weather_service),
):
    return ok(await service.get_weather_hazards(location), "Successfully retrieved weather hazards")


@weather_router.get(
    "/hazards/coordinates",
    response_model=ApiResponse[WeatherReport],
    summary="Plant hazards by coordinates",
    responses=ERROR_RESPONSES,
)
async def get_weather_hazards_by_coordinates(
    lat: Latitude,
    lon: Longitude,
    service: WeatherService = Depends(get_weather_service),
):
    return ok(
        await service.get_weather_hazards_by_coordinates(lat, lon),
        "Successfully retrieved weather hazards",
    )
