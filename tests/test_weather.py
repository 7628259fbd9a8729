"""
Weather tests: payload mapping, advice and hazard rules, location checks and
the service/client wiring with the provider mocked out.
"""

import asyncio
import copy
from datetime import datetime
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from app.main import app
from app.modules.weather.domain.services.weather_advisors import (
    FAVORABLE_ADVICE,
    PLANT_TYPE_SUGGESTIONS,
    GardeningAdviceAdvisor,
    PlantHazardAdvisor,
    WeatherThresholds,
)
from app.modules.weather.domain.services.weather_mapper import (
    WeatherPayloadError,
    air_hazards,
    air_quality_from_epa_index,
    cloud_type,
    map_weather_payload,
    precipitation_type,
)
from app.modules.weather.domain.services.weather_service import WeatherService
from app.modules.weather.infrastructure.external.world_weather_online_client import (
    WorldWeatherOnlineClient,
    format_coordinates,
    normalize_days,
    validate_location,
)
from app.modules.weather.presentation.api.schemas.weather_schemas import WeatherReport
from app.modules.weather.presentation.dependencies import get_weather_client
from app.shared.core.exceptions import ExternalAPIError, ValidationError

PAYLOAD = {
    "data": {
        "nearest_area": [{"areaName": [{"value": "Kandy"}]}],
        "current_condition": [{
            "temp_C": "31",
            "humidity": "85",
            "windspeedKmph": "25",
            "winddir16Point": "SW",
            "cloudcover": "60",
            "precipMM": "0.0",
            "uvIndex": "8",
            "air_quality": {"us-epa-index": "4", "pm2_5": "40.2", "pm10": "20"},
        }],
        "weather": [
            {"date": "2025-05-10", "hourly": [
                {"time": "0", "tempC": "27", "humidity": "80", "cloudcover": "40",
                 "precipMM": "1.2", "weatherDesc": [{"value": "Patchy rain"}]},
            ]},
            {"date": "2025-05-11", "hourly": [
                {"time": "300", "tempC": "24", "humidity": "90", "cloudcover": "90", "precipMM": "12.0"},
            ]},
        ],
        "alerts": {"alert": [{"headline": "Heat advisory"}]},
    }
}


def _run(coro):
    return asyncio.run(coro)


def _report(**overrides):
    fields = dict(
        location="Kandy",
        timestamp=datetime(2025, 5, 10, 9, 0),
        temperature=22.0,
        humidity=50.0,
        wind_speed=5.0,
        uv_index=1.0,
        precipitation=0.0,
    )
    fields.update(overrides)
    return WeatherReport(**fields)


# =============================================================================
# PAYLOAD MAPPING
# =============================================================================

def test_map_weather_payload_current_conditions():
    report = map_weather_payload(PAYLOAD, 1, "kandy, sri lanka")

    assert report.location == "Kandy"
    assert report.temperature == 31.0
    assert report.humidity == 85.0
    assert report.wind_speed == 25.0
    assert report.wind_direction == "SW"
    assert report.cloud_cover == 60
    assert report.cloud_type == "Stratocumulus"
    assert report.precipitation_type == "Rain"
    assert report.uv_index == 8.0
    assert report.weather_alert == "Heat advisory"


def test_map_weather_payload_air_quality():
    report = map_weather_payload(PAYLOAD, 1, "Kandy")

    assert report.air_quality_index == "Unhealthy"
    assert report.air_hazards == [
        "Increased likelihood of adverse respiratory effects in general population",
        "High PM2.5 (fine particulate matter) levels",
    ]


def test_map_weather_payload_forecast_respects_days():
    one_day = map_weather_payload(PAYLOAD, 1, "Kandy")
    two_days = map_weather_payload(PAYLOAD, 2, "Kandy")

    assert [item.forecast_time for item in one_day.forecast] == [datetime(2025, 5, 10, 0, 0)]
    assert [item.forecast_time for item in two_days.forecast] == [
        datetime(2025, 5, 10, 0, 0),
        datetime(2025, 5, 11, 3, 0),
    ]
    first = one_day.forecast[0]
    assert first.conditions == "Patchy rain"
    assert first.precipitation == 1.2
    assert first.alerts == ["Heat advisory"]


def test_map_weather_payload_falls_back_to_requested_location():
    payload = copy.deepcopy(PAYLOAD)
    del payload["data"]["nearest_area"]

    assert map_weather_payload(payload, 1, "Kandy, Sri Lanka").location == "Kandy, Sri Lanka"


def test_map_weather_payload_without_air_quality_is_good():
    payload = copy.deepcopy(PAYLOAD)
    del payload["data"]["current_condition"][0]["air_quality"]

    report = map_weather_payload(payload, 1, "Kandy")

    assert report.air_quality_index == "Good"
    assert report.air_hazards == []


@pytest.mark.parametrize("payload", [
    {},
    {"data": {"error": [{"msg": "Unable to find any matching weather location"}]}},
    {"data": {"current_condition": []}},
    ["not", "a", "dict"],
])
def test_map_weather_payload_rejects_unusable_payloads(payload):
    with pytest.raises(WeatherPayloadError):
        map_weather_payload(payload, 1, "Kandy")


@pytest.mark.parametrize("cover,expected", [(0, "Clear"), (19, "Clear"), (20, "Cumulus"), (50, "Stratocumulus"), (80, "Stratus")])
def test_cloud_type(cover, expected):
    assert cloud_type(cover) == expected


@pytest.mark.parametrize("temperature,expected", [(-1, "Snow"), (0, "Sleet"), (3.9, "Sleet"), (4, "Rain")])
def test_precipitation_type(temperature, expected):
    assert precipitation_type(temperature) == expected


def test_unknown_epa_index_is_moderate():
    assert air_quality_from_epa_index(1) == "Good"
    assert air_quality_from_epa_index(6) == "Hazardous"
    assert air_quality_from_epa_index(42) == "Moderate"


def test_good_air_has_no_hazards_even_with_pollutants():
    assert air_hazards("Good", {"pm2_5": 500}) == []


# =============================================================================
# ADVISORS
# =============================================================================

@pytest.mark.parametrize("overrides,expected", [
    ({"humidity": 81.0, "temperature": 35.0}, "High humidity may promote fungal growth. Consider fungicide application."),
    ({"temperature": 31.0}, "High temperatures expected. Ensure plants are well watered."),
    ({"precipitation": 10.5}, "Heavy rain expected. Check drainage systems and protect sensitive plants."),
    ({}, FAVORABLE_ADVICE),
])
def test_gardening_advice_first_matching_rule_wins(overrides, expected):
    advisor = GardeningAdviceAdvisor(WeatherThresholds())

    assert advisor.advice_for(_report(**overrides)) == expected


def test_hazards_for_mild_weather_are_tips_and_suggestions_only():
    hazards = PlantHazardAdvisor(WeatherThresholds()).hazards_for(_report())

    assert hazards == [
        "🌿 Ideal temperature range for healthy plant growth.",
        "🌧️ Comfortable humidity range for most plants.",
        "🌞 Low UV exposure. Good for all outdoor plants.",
        "💧 No rain today. Ensure manual watering, especially rooftop and container gardens.",
        "🌍 Air quality is good. Great day for outdoor gardening!",
        *PLANT_TYPE_SUGGESTIONS,
    ]


def test_hazard_rules_come_first_in_declaration_order():
    report = _report(temperature=2.0, wind_speed=40.0, precipitation=20.0, air_quality_index="Hazardous")

    hazards = PlantHazardAdvisor(WeatherThresholds()).hazards_for(report)

    assert hazards[:3] == [
        "Frost risk for outdoor plants",
        "Strong winds may damage tall or unstaked plants",
        "Heavy rain may lead to soil erosion and waterlogging",
    ]
    assert hazards[3] == "Poor air quality may affect sensitive plant species"
    assert hazards[4].startswith("❄️")
    assert len(hazards) == 4 + 5 + len(PLANT_TYPE_SUGGESTIONS)


def test_custom_thresholds_change_the_rules():
    thresholds = WeatherThresholds(frost_risk_temperature=25.0)

    hazards = PlantHazardAdvisor(thresholds).hazards_for(_report())

    assert hazards[0] == "Frost risk for outdoor plants"


# =============================================================================
# LOCATION AND DAYS
# =============================================================================

@pytest.mark.parametrize("location", ["London", "São Paulo, Brazil", "  St. Ives  ", "Kandy-Sri Lanka"])
def test_valid_locations(location):
    assert validate_location(location) == location.strip()


@pytest.mark.parametrize("location", [None, "", "   ", "Kandy; DROP TABLE", "<script>", "x" * 101])
def test_invalid_locations(location):
    with pytest.raises(ValidationError):
        validate_location(location)


def test_format_coordinates():
    assert format_coordinates(7.29, 80.63) == "7.29,80.63"
    with pytest.raises(ValidationError):
        format_coordinates(91, 0)
    with pytest.raises(ValidationError):
        format_coordinates(0, -181)


@pytest.mark.parametrize("days,expected", [(1, 1), (7, 7), (14, 14), (0, 3), (15, 3), (-2, 3)])
def test_normalize_days(days, expected):
    assert normalize_days(days) == expected


# =============================================================================
# CLIENT AND SERVICE
# =============================================================================

def test_client_builds_forecast_query():
    client = WorldWeatherOnlineClient("https://api.example/premium/v1", "secret")

    with patch.object(client, "get", AsyncMock(return_value=PAYLOAD)) as get:
        _run(client.get_weather_forecast("Kandy", 20))

    endpoint, = get.call_args.args
    params = get.call_args.kwargs["params"]
    assert endpoint == "weather.ashx"
    assert params["q"] == "Kandy"
    assert params["num_of_days"] == "3"
    assert params["tp"] == "24"
    assert params["key"] == "secret"
    assert params["aqi"] == "yes"


def test_client_rejects_bad_location_without_calling_provider():
    client = WorldWeatherOnlineClient("https://api.example/premium/v1", "secret")

    with patch.object(client, "get", AsyncMock()) as get:
        with pytest.raises(ValidationError):
            _run(client.get_current_weather("Kandy; rm -rf"))
    get.assert_not_awaited()


def _service(payload):
    client = AsyncMock(spec=WorldWeatherOnlineClient)
    client.api_name = "world-weather-online"
    client.get_current_weather.return_value = payload
    client.get_weather_forecast.return_value = payload
    return client, WeatherService(client, WeatherThresholds(), garden_forecast_days=2)


def test_service_adds_plant_hazards():
    _, service = _service(PAYLOAD)

    report = _run(service.get_current_weather("Kandy"))

    assert report.plant_hazards[:4] == [
        "Heat stress risk for sensitive plants",
        "High UV may cause leaf scorching on sensitive plants",
        "Strong winds may damage tall or unstaked plants",
        "Poor air quality may affect sensitive plant species",
    ]
    assert report.gardening_advice is None
    assert len(report.forecast) == 1


def test_garden_weather_uses_configured_days_and_adds_advice():
    client, service = _service(PAYLOAD)

    report = _run(service.get_garden_weather("Kandy", garden_plan_id="plan-1"))

    client.get_weather_forecast.assert_awaited_once_with("Kandy", 2)
    assert len(report.forecast) == 2
    assert report.gardening_advice == "High humidity may promote fungal growth. Consider fungicide application."


def test_service_turns_bad_payload_into_external_api_error():
    _, service = _service({"data": {"error": [{"msg": "Unknown location"}]}})

    with pytest.raises(ExternalAPIError) as exc_info:
        _run(service.get_current_weather("Atlantis"))
    assert exc_info.value.status_code == 502


def test_service_forecast_normalizes_days():
    client, service = _service(PAYLOAD)

    _run(service.get_weather_forecast("Kandy", 30))

    client.get_weather_forecast.assert_awaited_once_with("Kandy", 3)


# =============================================================================
# ENDPOINTS
# =============================================================================

@pytest.fixture
def weather_client(client):
    provider = WorldWeatherOnlineClient("https://api.example/premium/v1", "secret")
    provider.get = AsyncMock(return_value=PAYLOAD)

    async def override_get_weather_client():
        yield provider

    app.dependency_overrides[get_weather_client] = override_get_weather_client
    yield client, provider


def test_garden_weather_endpoint(weather_client):
    client, provider = weather_client

    response = client.get("/api/v1/weather/garden", params={"location": "Kandy", "gardenPlanId": "plan-1"})

    assert response.status_code == 200
    body = response.json()
    assert body["message"] == "Successfully retrieved garden weather information"
    assert body["data"]["location"] == "Kandy"
    assert body["data"]["gardening_advice"]
    assert provider.get.await_count == 1


def test_forecast_endpoint_limits_days(weather_client):
    client, provider = weather_client

    response = client.get("/api/v1/weather/forecast", params={"location": "Kandy", "days": 8})

    assert response.status_code == 400
    provider.get.assert_not_awaited()


def test_current_weather_endpoint_rejects_bad_location(weather_client):
    client, _ = weather_client

    response = client.get("/api/v1/weather/current", params={"location": "Kandy; DROP"})

    assert response.status_code == 400
    assert response.json()["code"] == "VALIDATION_ERROR"


def test_provider_failure_is_bad_gateway(weather_client):
    client, provider = weather_client
    provider.get.side_effect = ExternalAPIError("Server error for world-weather-online (503)", api_name="world-weather-online")

    response = client.get("/api/v1/weather/hazards/coordinates", params={"lat": 7.29, "lon": 80.63})

    assert response.status_code == 502
    assert response.json()["code"] == "EXTERNAL_API_ERROR"


def _upstream_response(status, body):
    response = MagicMock()
    response.status = status
    response.headers = {}
    response.text = AsyncMock(return_value=body)
    return response


def test_upstream_error_body_is_kept_out_of_the_message():
    provider = WorldWeatherOnlineClient("https://api.example/premium/v1", "secret")
    body = "<html>Internal Server Error at db-node-3: key=secret</html>"

    with pytest.raises(ExternalAPIError) as exc_info:
        _run(provider._handle_response_status(_upstream_response(503, body)))

    assert exc_info.value.message == "Server error for world-weather-online (503)"
    assert exc_info.value.details["upstream_status"] == 503
    assert exc_info.value.details["response_body"] == body


def test_bad_gateway_envelope_does_not_leak_upstream_body(weather_client):
    client, provider = weather_client
    body = "Traceback (most recent call last): upstream internals"

    async def failing_get(*args, **kwargs):
        await provider._handle_response_status(_upstream_response(500, body))

    provider.get.side_effect = failing_get

    response = client.get("/api/v1/weather/current", params={"location": "Kandy"})

    assert response.status_code == 502
    assert response.json()["message"] == "Server error for world-weather-online (500)"
    assert "Traceback" not in response.text
