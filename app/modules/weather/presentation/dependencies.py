# 📄 File: app/modules/weather/presentation/dependencies.py
# 🧭 Purpose (Layman Explanation):
# Opens a connection to the weather provider for each weather request and closes it afterwards.
# 🧪 Purpose (Technical Summary):
# FastAPI dependency providers: a request-scoped WorldWeatherOnlineClient (aiohttp session
# opened and closed around the request) and the WeatherService built on it.
# 🔗 Dependencies:
# FastAPI Depends, app.shared.config.settings
# 🔄 Connected Modules / Calls From:
# app.modules.weather.presentation.api.v1.weather

from typing import AsyncIterator

from fastapi import Depends

from app.modules.weather.domain.services.weather_advisors import WeatherThresholds
from app.modules.weather.domain.services.weather_service import WeatherService
from app.modules.weather.infrastructure.external.world_weather_online_client import WorldWeatherOnlineClient


async def get_weather_client() -> AsyncIterator[WorldWeatherOnlineClient]:
    async with WorldWeatherOnlineClient.from_settings() as client:
        yield client


def get_weather_service(client: WorldWeatherOnlineClient = Depends(get_weather_client)) -> WeatherService:
    return WeatherService(client, WeatherThresholds.from_settings())
