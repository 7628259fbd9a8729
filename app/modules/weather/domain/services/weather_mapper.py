# 📄 File: app/modules/weather/domain/services/weather_mapper.py
# 🧭 Purpose (Layman Explanation):
# Turns the weather provider's raw answer into the tidy weather report the app shows.
#
# 🧪 Purpose (Technical Summary):
# Maps a World Weather Online JSON payload onto WeatherReport: current
# conditions, derived cloud / precipitation types, air quality from the US EPA
# index with pollutant hazards, hourly forecast items and alerts.
#
# 🔗 Dependencies:
# - app.modules.weather.presentation.api.schemas.weather_schemas
#
# 🔄 Connected Modules / Calls From:
# - app.modules.weather.domain.services.weather_service

import logging
from datetime import date, datetime, time
from typing import Any, Dict, List, Optional

from app.modules.weather.presentation.api.schemas.weather_schemas import ForecastItem, WeatherReport
from app.shared.config.database import utc_now

logger = logging.getLogger(__name__)

GOOD = "Good"
MODERATE = "Moderate"
UNHEALTHY_FOR_SENSITIVE_GROUPS = "Unhealthy for Sensitive Groups"
UNHEALTHY = "Unhealthy"
VERY_UNHEALTHY = "Very Unhealthy"
HAZARDOUS = "Hazardous"

EPA_INDEX_LEVELS = {
    1: GOOD,
    2: MODERATE,
    3: UNHEALTHY_FOR_SENSITIVE_GROUPS,
    4: UNHEALTHY,
    5: VERY_UNHEALTHY,
    6: HAZARDOUS,
}
AIR_QUALITY_LEVELS = {name: level for level, name in EPA_INDEX_LEVELS.items()}

AIR_QUALITY_DESCRIPTIONS = {
    MODERATE: "Mild pollen and low-level particulates",
    UNHEALTHY_FOR_SENSITIVE_GROUPS: "May cause respiratory symptoms in sensitive individuals",
    UNHEALTHY: "Increased likelihood of adverse respiratory effects in general population",
    VERY_UNHEALTHY: "Significant respiratory effects can be expected in general population",
    HAZARDOUS: "Serious respiratory effects and health impacts for all",
}

# (payload key, limit, hazard)
POLLUTANT_LIMITS = (
    ("pm2_5", 35, "High PM2.5 (fine particulate matter) levels"),
    ("pm10", 150, "High PM10 (coarse particulate matter) levels"),
    ("o3", 100, "High ozone levels"),
    ("no2", 100, "High nitrogen dioxide levels"),
)


class WeatherPayloadError(ValueError):
    """The provider answered with something that is not a weather payload."""


def _float(value: Any, default: float = 0.0) -> float:
    try:
        return float(value)
    except (TypeError, ValueError):
        return default


def _int(value: Any, default: int = 0) -> int:
    try:
        return int(float(value))
    except (TypeError, ValueError):
        return default


def _first_value(items: Any) -> Optional[str]:
    """Provider strings come wrapped as [{"value": "..."}]."""
    if isinstance(items, list) and items and isinstance(items[0], dict):
        return items[0].get("value")
    return None


def cloud_type(cloud_cover: int) -> str:
    if cloud_cover < 20:
        return "Clear"
    elif cloud_cover < 50:
        return "Cumulus"
    elif cloud_cover < 80:
        return "Stratocumulus"
    return "Stratus"


def precipitation_type(temperature: float) -> str:
    if temperature < 0:
        return "Snow"
    elif temperature < 4:
        return "Sleet"
    return "Rain"


def air_quality_from_epa_index(epa_index: int) -> str:
    level = EPA_INDEX_LEVELS.get(epa_index)
    if level is None:
        logger.warning(f"Unknown EPA index value: {epa_index}, defaulting to {MODERATE}")
        return MODERATE
    return level


def air_quality_level(description: Optional[str]) -> int:
    """Numeric 1..6 level for an air quality description, Moderate when unknown."""
    return AIR_QUALITY_LEVELS.get(description, 2)


def air_hazards(air_quality: str, air_quality_data: Dict[str, Any]) -> List[str]:
    if air_quality == GOOD:
        return []

    hazards = [AIR_QUALITY_DESCRIPTIONS[air_quality]] if air_quality in AIR_QUALITY_DESCRIPTIONS else []
    for key, limit, hazard in POLLUTANT_LIMITS:
        if key in air_quality_data and _float(air_quality_data[key]) > limit:
            hazards.append(hazard)
    return hazards


def location_name(data: Dict[str, Any], default: str) -> str:
    nearest = data.get("nearest_area") or []
    if nearest and isinstance(nearest[0], dict):
        name = _first_value(nearest[0].get("areaName"))
        if name:
            return name
    return default


def alert_headlines(data: Dict[str, Any]) -> List[str]:
    node = data.get("alerts")
    alerts = node.get("alert") or [] if isinstance(node, dict) else []
    return [a.get("headline", "") for a in alerts if isinstance(a, dict)]


def forecast_items(data: Dict[str, Any], days: int) -> List[ForecastItem]:
    alerts = alert_headlines(data)
    items = []
    for day in (data.get("weather") or [])[:days]:
        day_date = date.fromisoformat(day["date"])
        for hourly in day.get("hourly") or []:
            # "0", "300", ... "2100"
            hour = _int(hourly.get("time")) // 100
            items.append(ForecastItem(
                forecast_time=datetime.combine(day_date, time(hour=hour)),
                temperature=_float(hourly.get("tempC")),
                humidity=_float(hourly.get("humidity")),
                cloud_cover=_int(hourly.get("cloudcover")),
                precipitation=_float(hourly.get("precipMM")),
                conditions=_first_value(hourly.get("weatherDesc")),
                alerts=list(alerts),
            ))
    return items


def map_weather_payload(payload: Dict[str, Any], days: int, location: str) -> WeatherReport:
    """
    Build a WeatherReport from a weather.ashx response.

    Raises:
        WeatherPayloadError: When the payload carries no current conditions
    """
    data = payload.get("data") if isinstance(payload, dict) else None
    if not isinstance(data, dict):
        raise WeatherPayloadError("Weather payload has no data section")

    if data.get("error"):
        raise WeatherPayloadError(_first_value(data["error"]) or "Weather provider returned an error")

    conditions = data.get("current_condition") or []
    if not conditions:
        raise WeatherPayloadError("Weather payload has no current conditions")
    current = conditions[0]

    temperature = _float(current.get("temp_C"))
    cloud_cover = _int(current.get("cloudcover"))

    air_quality = GOOD
    hazards: List[str] = []
    if "air_quality" in current:
        air_quality_data = current.get("air_quality") or {}
        air_quality = air_quality_from_epa_index(_int(air_quality_data.get("us-epa-index")))
        hazards = air_hazards(air_quality, air_quality_data)

    alerts = alert_headlines(data)

    return WeatherReport(
        location=location_name(data, location),
        timestamp=utc_now(),
        temperature=temperature,
        humidity=_float(current.get("humidity")),
        wind_speed=_float(current.get("windspeedKmph")),
        wind_direction=current.get("winddir16Point"),
        cloud_cover=cloud_cover,
        cloud_type=cloud_type(cloud_cover),
        precipitation=_float(current.get("precipMM")),
        precipitation_type=precipitation_type(temperature),
        uv_index=_float(current.get("uvIndex")),
        air_quality_index=air_quality,
        air_hazards=hazards,
        forecast=forecast_items(data, days),
        weather_alert=alerts[0] if alerts else None,
    )
