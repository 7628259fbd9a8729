# 📄 File: app/modules/weather/infrastructure/external/world_weather_online_client.py
# 🧭 Purpose (Layman Explanation):
# Asks the World Weather Online service for current conditions and forecasts,
# after checking that the place name we were given looks like a real place name.
#
# 🧪 Purpose (Technical Summary):
# APIClient subclass for the World Weather Online premium v1 API. Builds the
# weather.ashx query (current, forecast, air quality and alerts), validates free
# text locations and formats coordinate queries.
#
# 🔗 Dependencies:
# - app.shared.infrastructure.external_apis.APIClient (aiohttp + tenacity)
# - app.shared.config.settings (WEATHER_API_KEY, WEATHER_API_URL)
#
# 🔄 Connected Modules / Calls From:
# - app.modules.weather.domain.services.weather_service
# - app.modules.weather.presentation.dependencies

import logging
import re
from typing import Any, Dict, Optional

from app.shared.config.settings import get_settings
from app.shared.core.exceptions import ValidationError
from app.shared.infrastructure.external_apis import APIClient

logger = logging.getLogger(__name__)

WEATHER_ENDPOINT = "weather.ashx"
DEFAULT_FORECAST_DAYS = 3
MAX_FORECAST_DAYS = 14
MAX_LOCATION_LENGTH = 100

# letters (any script), digits, whitespace and , . -
LOCATION_PATTERN = re.compile(r"^(?:[^\W_]|[\s,.\-])+$")


def validate_location(location: Optional[str]) -> str:
    """Reject blank, overlong or oddly punctuated location queries."""
    if location is None or not location.strip():
        raise ValidationError("Location parameter is required", field="location")

    location = location.strip()
    if len(location) > MAX_LOCATION_LENGTH:
        raise ValidationError(
            f"Location must be at most {MAX_LOCATION_LENGTH} characters",
            field="location",
        )
    if not LOCATION_PATTERN.match(location):
        raise ValidationError("Invalid characters in location parameter", field="location", value=location)
    return location


def format_coordinates(latitude: float, longitude: float) -> str:
    if not -90 <= latitude <= 90 or not -180 <= longitude <= 180:
        raise ValidationError(
            "Invalid coordinates: latitude must be between -90 and 90, longitude between -180 and 180"
        )
    return f"{latitude},{longitude}"


def normalize_days(days: int) -> int:
    if days < 1 or days > MAX_FORECAST_DAYS:
        logger.warning(f"Invalid days parameter: {days}. Using default value of {DEFAULT_FORECAST_DAYS}")
        return DEFAULT_FORECAST_DAYS
    return days


class WorldWeatherOnlineClient(APIClient):
    """
    Client for the World Weather Online weather.ashx endpoint.

    Every call asks for current conditions, forecast, air quality and alerts in
    JSON; forecasts additionally request one aggregated slot per day (tp=24).
    """

    def __init__(self, base_url: str, api_key: Optional[str], timeout: int = 10, max_retries: int = 3):
        super().__init__(
            base_url=base_url,
            api_key=api_key,
            api_name="world-weather-online",
            timeout=timeout,
            max_retries=max_retries,
        )

    @classmethod
    def from_settings(cls) -> "WorldWeatherOnlineClient":
        settings = get_settings()
        return cls(
            base_url=settings.WEATHER_API_URL,
            api_key=settings.WEATHER_API_KEY,
            timeout=settings.EXTERNAL_API_TIMEOUT,
            max_retries=settings.EXTERNAL_API_MAX_RETRIES,
        )

    def _base_params(self, query: str, days: int) -> Dict[str, Any]:
        return {
            "q": query,
            "format": "json",
            "num_of_days": str(days),
            "fx": "yes",
            "cc": "yes",
            "aqi": "yes",
            "alerts": "yes",
        }

    async def _fetch(self, params: Dict[str, Any]) -> Dict[str, Any]:
        params["key"] = self.api_key or ""
        logger.debug(f"Requesting weather for q={params['q']} days={params['num_of_days']}")
        return await self.get(WEATHER_ENDPOINT, params=params)

    async def get_current_weather(self, location: str) -> Dict[str, Any]:
        return await self._fetch(self._base_params(validate_location(location), 1))

    async def get_current_weather_by_coordinates(self, latitude: float, longitude: float) -> Dict[str, Any]:
        return await self._fetch(self._base_params(format_coordinates(latitude, longitude), 1))

    async def get_weather_forecast(self, location: str, days: int) -> Dict[str, Any]:
        params = self._base_params(validate_location(location), normalize_days(days))
        params["tp"] = "24"
        return await self._fetch(params)

    async def get_weather_forecast_by_coordinates(
        self, latitude: float, longitude: float, days: int
    ) -> Dict[str, Any]:
        params = self._base_params(format_coordinates(latitude, longitude), normalize_days(days))
        params["tp"] = "24"
        return await self._fetch(params)
