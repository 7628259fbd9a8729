# 📄 File: app/modules/weather/domain/services/weather_advisors.py
# 🧭 Purpose (Layman Explanation):
# Reads a weather report the way an experienced gardener would and writes down
# one line of advice plus a list of things to watch out for today.
#
# 🧪 Purpose (Technical Summary):
# Threshold driven gardening advice (first matching rule wins) and plant hazard
# list (rule hits, then one tip per category, then fixed plant-type suggestions).
# Thresholds come from settings so deployments can tune them.
#
# 🔗 Dependencies:
# - app.shared.config.settings (weather thresholds)
# - app.modules.weather.domain.services.weather_mapper (air quality levels)
#
# 🔄 Connected Modules / Calls From:
# - app.modules.weather.domain.services.weather_service

from dataclasses import dataclass
from typing import Callable, List, Optional, Tuple

from app.modules.weather.domain.services.weather_mapper import GOOD, MODERATE, air_quality_level
from app.modules.weather.presentation.api.schemas.weather_schemas import WeatherReport
from app.shared.config.settings import Settings, get_settings


@dataclass(frozen=True)
class WeatherThresholds:
    heat_stress_temperature: float = 28.0
    frost_risk_temperature: float = 5.0
    high_humidity: float = 85.0
    high_uv_index: float = 7.0
    strong_wind_speed: float = 20.0
    heavy_rain_precipitation: float = 15.0

    high_humidity_advice: float = 80.0
    high_temperature_advice: float = 30.0
    heavy_rain_advice: float = 10.0

    cold_temperature: float = 15.0
    ideal_temperature_max: float = 32.0
    high_heat_temperature: float = 36.0
    very_dry_humidity: float = 30.0
    comfortable_humidity_max: float = 70.0
    low_uv_index: float = 2.0
    moderate_uv_index: float = 5.0

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> "WeatherThresholds":
        settings = settings or get_settings()
        return cls(
            heat_stress_temperature=settings.HEAT_STRESS_TEMPERATURE,
            frost_risk_temperature=settings.FROST_RISK_TEMPERATURE,
            high_humidity=settings.HIGH_HUMIDITY,
            high_uv_index=settings.HIGH_UV_INDEX,
            strong_wind_speed=settings.STRONG_WIND_SPEED,
            heavy_rain_precipitation=settings.HEAVY_RAIN_PRECIPITATION,
            high_humidity_advice=settings.HIGH_HUMIDITY_ADVICE,
            high_temperature_advice=settings.HIGH_TEMPERATURE_ADVICE,
            heavy_rain_advice=settings.HEAVY_RAIN_ADVICE,
            cold_temperature=settings.COLD_TEMPERATURE,
            ideal_temperature_max=settings.IDEAL_TEMPERATURE_MAX,
            high_heat_temperature=settings.HIGH_HEAT_TEMPERATURE,
            very_dry_humidity=settings.VERY_DRY_HUMIDITY,
            comfortable_humidity_max=settings.COMFORTABLE_HUMIDITY_MAX,
            low_uv_index=settings.LOW_UV_INDEX,
            moderate_uv_index=settings.MODERATE_UV_INDEX,
        )


FAVORABLE_ADVICE = "Weather conditions are favorable for gardening activities."

PLANT_TYPE_SUGGESTIONS = (
    "🌵 Succulents: Thriving in sunny, dry weather. Minimal watering needed.",
    "🌺 Flowering Plants: Great time to deadhead and fertilize to encourage blooms.",
    "🍅 Vegetables: Consistent watering critical. Monitor for heat or pest stress.",
    "🌿 Herbs: Harvest early in the day for maximum flavor and aroma.",
)


class GardeningAdviceAdvisor:
    """One line of advice; humidity beats heat, heat beats rain."""

    def __init__(self, thresholds: WeatherThresholds):
        self.thresholds = thresholds

    def advice_for(self, weather: WeatherReport) -> str:
        t = self.thresholds
        if weather.humidity > t.high_humidity_advice:
            return "High humidity may promote fungal growth. Consider fungicide application."
        elif weather.temperature > t.high_temperature_advice:
            return "High temperatures expected. Ensure plants are well watered."
        elif weather.precipitation > t.heavy_rain_advice:
            return "Heavy rain expected. Check drainage systems and protect sensitive plants."
        return FAVORABLE_ADVICE

    def enrich(self, weather: WeatherReport) -> WeatherReport:
        weather.gardening_advice = self.advice_for(weather)
        return weather


Rule = Tuple[Callable[[WeatherReport], bool], str]


class PlantHazardAdvisor:
    """
    Builds the plant hazard list for a weather report.

    Order is stable: every matching rule in declaration order, then one tip
    each for temperature, humidity, UV, precipitation and air quality, then the
    plant-type suggestions.
    """

    def __init__(self, thresholds: WeatherThresholds):
        self.thresholds = thresholds
        self.rules = self._build_rules()

    def _build_rules(self) -> List[Rule]:
        t = self.thresholds
        return [
            (lambda w: w.temperature > t.heat_stress_temperature,
             "Heat stress risk for sensitive plants"),
            (lambda w: w.temperature < t.frost_risk_temperature,
             "Frost risk for outdoor plants"),
            (lambda w: w.humidity > t.high_humidity,
             "High humidity may increase fungal disease risk"),
            (lambda w: w.uv_index > t.high_uv_index,
             "High UV may cause leaf scorching on sensitive plants"),
            (lambda w: w.wind_speed > t.strong_wind_speed,
             "Strong winds may damage tall or unstaked plants"),
            (lambda w: w.precipitation > t.heavy_rain_precipitation,
             "Heavy rain may lead to soil erosion and waterlogging"),
            (lambda w: w.air_quality_index not in (GOOD, MODERATE),
             "Poor air quality may affect sensitive plant species"),
        ]

    def hazards_for(self, weather: WeatherReport) -> List[str]:
        hazards = [message for condition, message in self.rules if condition(weather)]
        hazards.append(self.temperature_tip(weather.temperature))
        hazards.append(self.humidity_tip(weather.humidity))
        hazards.append(self.uv_tip(weather.uv_index))
        hazards.append(self.precipitation_tip(weather.precipitation))
        hazards.append(self.air_quality_tip(weather.air_quality_index))
        hazards.extend(PLANT_TYPE_SUGGESTIONS)
        return hazards

    def temperature_tip(self, temperature: float) -> str:
        t = self.thresholds
        if temperature < t.cold_temperature:
            return "❄️ Cold stress possible. Protect delicate plants, especially young seedlings."
        elif temperature <= t.ideal_temperature_max:
            return "🌿 Ideal temperature range for healthy plant growth."
        elif temperature <= t.high_heat_temperature:
            return "☀️ High heat today. Water early in the morning to prevent heat stress."
        return "⚡️ Extreme heat warning! Provide shade and monitor plants closely."

    def humidity_tip(self, humidity: float) -> str:
        if humidity < self.thresholds.very_dry_humidity:
            return "💧 Very dry conditions. Mist indoor plants and check soil moisture more often."
        elif humidity <= self.thresholds.comfortable_humidity_max:
            return "🌧️ Comfortable humidity range for most plants."
        return "💧 High humidity detected. Watch for fungal diseases and avoid overhead watering."

    def uv_tip(self, uv_index: float) -> str:
        t = self.thresholds
        if uv_index <= t.low_uv_index:
            return "🌞 Low UV exposure. Good for all outdoor plants."
        elif uv_index <= t.moderate_uv_index:
            return "⚡️ Moderate UV levels. Shade delicate plants if possible."
        elif uv_index <= t.high_uv_index:
            return "🔥 High UV levels. Protect sensitive plants during peak hours."
        return "🌞 Very high UV! Ensure shade for vulnerable plants and avoid midday gardening."

    @staticmethod
    def precipitation_tip(precipitation: float) -> str:
        if precipitation == 0:
            return "💧 No rain today. Ensure manual watering, especially rooftop and container gardens."
        return "🌧️ Some rain expected. Check drainage to avoid waterlogged soil."

    @staticmethod
    def air_quality_tip(air_quality: str) -> str:
        level = air_quality_level(air_quality)
        if level <= 2:
            return "🌍 Air quality is good. Great day for outdoor gardening!"
        elif level == 3:
            return "🌍 Moderate air quality. Sensitive individuals should take light precautions."
        elif level == 4:
            return "🚫 Air quality is unhealthy for sensitive groups. Limit heavy outdoor gardening."
        return "⚡️ Very unhealthy air quality. Prefer indoor gardening activities today."
