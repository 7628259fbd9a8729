# 📄 File: app/modules/weather/domain/services/weather_service.py
# 🧭 Purpose (Layman Explanation):
# Gets the weather for a town or a map position and adds what it means for the
# garden: hazards to watch for and, for garden reports, a piece of advice.
#
# 🧪 Purpose (Technical Summary):
# Orchestrates WorldWeatherOnlineClient calls, payload mapping and the advice /
# hazard advisors. Caller errors (bad location, bad coordinates) and upstream
# failures propagate as application exceptions; malformed payloads surface as
# ExternalAPIError.
#
# 🔗 Dependencies:
# - WorldWeatherOnlineClient, weather_mapper, weather_advisors
#
# 🔄 Connected Modules / Calls From:
# - app.modules.weather.presentation.api.v1.weather

import logging
from typing import Any, Awaitable, Callable, Dict, Optional

from app.modules.weather.domain.services.weather_advisors import (
    GardeningAdviceAdvisor,
    PlantHazardAdvisor,
    WeatherThresholds,
)
from app.modules.weather.domain.services.weather_mapper import map_weather_payload
from app.modules.weather.infrastructure.external.world_weather_online_client import (
    WorldWeatherOnlineClient,
    format_coordinates,
    normalize_days,
)
from app.modules.weather.presentation.api.schemas.weather_schemas import WeatherReport
from app.shared.config.settings import get_settings
from app.shared.core.exceptions import ExternalAPIError

logger = logging.getLogger(__name__)


class WeatherService:

    def __init__(
        self,
        client: WorldWeatherOnlineClient,
        thresholds: Optional[WeatherThresholds] = None,
        garden_forecast_days: Optional[int] = None,
    ):
        self.client = client
        thresholds = thresholds or WeatherThresholds.from_settings()
        self.advice_advisor = GardeningAdviceAdvisor(thresholds)
        self.hazard_advisor = PlantHazardAdvisor(thresholds)
        self.garden_forecast_days = garden_forecast_days or get_settings().GARDEN_WEATHER_FORECAST_DAYS

    async def _report(
        self,
        fetch: Callable[[], Awaitable[Dict[str, Any]]],
        days: int,
        location: str,
    ) -> WeatherReport:
        payload = await fetch()
        try:
            report = map_weather_payload(payload, days, location)
        except (KeyError, TypeError, ValueError) as e:
            logger.error(f"Error parsing weather API response for {location}: {e}", exc_info=True)
            raise ExternalAPIError("Failed to parse weather data", api_name=self.client.api_name) from e

        report.plant_hazards = self.hazard_advisor.hazards_for(report)
        return report

    async def get_current_weather(self, location: str) -> WeatherReport:
        logger.info(f"Fetching current weather for location: {location}")
        return await self._report(lambda: self.client.get_current_weather(location), 1, location)

    async def get_current_weather_by_coordinates(self, latitude: float, longitude: float) -> WeatherReport:
        logger.info(f"Fetching current weather for coordinates: {latitude}, {longitude}")
        return await self._report(
            lambda: self.client.get_current_weather_by_coordinates(latitude, longitude),
            1,
            format_coordinates(latitude, longitude),
        )

    async def get_weather_forecast(self, location: str, days: int) -> WeatherReport:
        logger.info(f"Fetching weather forecast for location: {location} for {days} days")
        days = normalize_days(days)
        return await self._report(
            lambda: self.client.get_weather_forecast(location, days),
            days,
            location,
        )

    async def get_weather_forecast_by_coordinates(
        self, latitude: float, longitude: float, days: int
    ) -> WeatherReport:
        logger.info(f"Fetching weather forecast for coordinates: {latitude}, {longitude} for {days} days")
        days = normalize_days(days)
        return await self._report(
            lambda: self.client.get_weather_forecast_by_coordinates(latitude, longitude, days),
            days,
            format_coordinates(latitude, longitude),
        )

    async def get_garden_weather(self, location: str, garden_plan_id: Optional[str] = None) -> WeatherReport:
        logger.info(f"Fetching garden weather for location: {location}, garden plan ID: {garden_plan_id or 'not provided'}")
        report = await self.get_weather_forecast(location, self.garden_forecast_days)
        return self.advice_advisor.enrich(report)

    async def get_garden_weather_by_coordinates(
        self, latitude: float, longitude: float, garden_plan_id: Optional[str] = None
    ) -> WeatherReport:
        logger.info(
            f"Fetching garden weather for coordinates: {latitude}, {longitude}, "
            f"garden plan ID: {garden_plan_id or 'not provided'}"
        )
        report = await self.get_weather_forecast_by_coordinates(latitude, longitude, self.garden_forecast_days)
        return self.advice_advisor.enrich(report)

    async def get_weather_hazards(self, location: str) -> WeatherReport:
        return await self.get_current_weather(location)

    async def get_weather_hazards_by_coordinates(self, latitude: float, longitude: float) -> WeatherReport:
        return await self.get_current_weather_by_coordinates(latitude, longitude)
