# 📄 File: app/modules/weather/presentation/api/schemas/weather_schemas.py
#
# 🧭 Purpose (Layman Explanation):
# Describes a weather report the way the app sends it back: today's conditions,
# the hourly forecast and any advice or warnings for the garden.
#
# 🧪 Purpose (Technical Summary):
# Pydantic models for the normalized weather report and its forecast items.
#
# 🔗 Dependencies:
# - pydantic
#
# 🔄 Connected Modules / Calls From:
# - app.modules.weather.domain.services (mapper, advisors, service)
# - app.modules.weather.presentation.api.v1.weather

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field


class ForecastItem(BaseModel):
    forecast_time: datetime
    temperature: float
    humidity: Optional[float] = None
    cloud_cover: Optional[int] = None
    precipitation: Optional[float] = None
    conditions: Optional[str] = None
    alerts: List[str] = Field(default_factory=list)


class WeatherReport(BaseModel):
    """Current conditions for a location plus the requested forecast."""

    location: str
    timestamp: datetime
    temperature: float
    temperature_unit: str = "Celsius"
    humidity: float
    wind_speed: float
    wind_speed_unit: str = "km/h"
    wind_direction: Optional[str] = None
    cloud_cover: int = 0
    cloud_type: Optional[str] = None
    precipitation: float = 0.0
    precipitation_type: Optional[str] = None
    uv_index: float = 0.0
    air_quality_index: str = "Good"
    air_hazards: List[str] = Field(default_factory=list)
    plant_hazards: List[str] = Field(default_factory=list)
    forecast: List[ForecastItem] = Field(default_factory=list)
    weather_alert: Optional[str] = None
    gardening_advice: Optional[str] = None
