"""
Plant recommendation tests: season resolution, prompts, tolerant parsing of
the assistant's answer and the service with both providers mocked.
"""

import asyncio
from datetime import date
from unittest.mock import AsyncMock, MagicMock

import pytest
from pydantic import ValidationError as PydanticValidationError

from app.main import app
from app.modules.ai_features.domain.services.plant_recommendation_service import PlantRecommendationService
from app.modules.ai_features.domain.services.prompt_builder import (
    build_system_prompt,
    build_user_prompt,
    current_season,
    is_southern_hemisphere,
)
from app.modules.ai_features.domain.services.recommendation_parser import (
    RecommendationParseError,
    close_unbalanced,
    extract_json_block,
    parse_recommendations,
)
from app.modules.ai_features.infrastructure.external.openai_client import OpenAIClient
from app.modules.ai_features.infrastructure.external.unsplash_client import UnsplashClient
from app.modules.ai_features.presentation.api.schemas.recommendation_schemas import (
    PlantRecommendation,
    PlantRecommendationRequest,
)
from app.modules.ai_features.presentation.dependencies import get_plant_recommendation_service
from app.shared.core.exceptions import ExternalAPIError

ANSWER = """
Here are some ideas for your balcony:
```json
[
  {"name": "Basil", "type": "herb", "companion_plants": "Tomato, Pepper", "image_url": ""},
  {"name": "Mint", "type": "herb", "companion_plants": ["Chamomile"]}
]
```
Happy gardening!
"""


def _run(coro):
    return asyncio.run(coro)


def _request(**fields):
    payload = {"garden_type": "balcony", "message": "Easy herbs I can cook with", **fields}
    return PlantRecommendationRequest(**payload)


# =============================================================================
# SEASONS AND PROMPTS
# =============================================================================

@pytest.mark.parametrize("location,today,expected", [
    ("London", date(2025, 7, 1), "summer"),
    (None, date(2025, 1, 15), "winter"),
    ("Sydney, Australia", date(2025, 7, 1), "winter"),
    ("Cape Town, South Africa", date(2025, 10, 1), "spring"),
    ("Mendoza, argentina", date(2025, 4, 1), "autumn"),
])
def test_current_season(location, today, expected):
    assert current_season(location, today) == expected


def test_southern_hemisphere_detection():
    assert is_southern_hemisphere("Auckland, New Zealand")
    assert not is_southern_hemisphere("Colombo, Sri Lanka")
    assert not is_southern_hemisphere(None)


def test_user_prompt_defaults():
    prompt = build_user_prompt(_request(), "spring")

    assert "- Type: balcony" in prompt
    assert "- Location: Unknown" in prompt
    assert "- Current season: spring" in prompt
    assert "- Gardening experience: beginner" in prompt
    assert "- Time commitment: moderate" in prompt
    assert "- Harvest goals: general gardening" in prompt
    assert "- Existing plants: None yet" in prompt
    assert "Garden size" not in prompt
    assert "User query: Easy herbs I can cook with" in prompt


def test_user_prompt_with_preferences():
    request = _request(
        location="Colombo, Sri Lanka",
        existing_plants=["Basil", "  ", "Chilli"],
        user_preferences={"experience_level": "expert", "garden_size": "2 m² balcony", "harvest_goals": ["herbs"]},
    )

    prompt = build_user_prompt(request, "summer")

    assert "- Location: Colombo, Sri Lanka" in prompt
    assert "- Gardening experience: expert" in prompt
    assert "- Existing plants: Basil, Chilli" in prompt
    assert "- Harvest goals: herbs" in prompt
    assert "- Garden size: 2 m² balcony" in prompt


def test_system_prompt_names_the_season():
    assert "current season (autumn)" in build_system_prompt("autumn")


def test_request_normalizes_season_and_blank_location():
    request = _request(season="Fall", location="   ")

    assert request.season == "autumn"
    assert request.location is None


def test_request_rejects_unknown_season():
    with pytest.raises(PydanticValidationError):
        _request(season="monsoon")


# =============================================================================
# PARSING
# =============================================================================

def test_parse_recommendations_from_fenced_answer():
    recommendations = parse_recommendations(ANSWER)

    assert [r.name for r in recommendations] == ["Basil", "Mint"]
    assert recommendations[0].companion_plants == ["Tomato", "Pepper"]
    assert recommendations[0].image_url is None
    assert recommendations[1].companion_plants == ["Chamomile"]


def test_lone_object_is_wrapped_in_a_list():
    recommendations = parse_recommendations('Sure! {"name": "Rosemary", "type": "herb"} Hope it helps')

    assert [r.name for r in recommendations] == ["Rosemary"]


def test_trailing_commas_are_repaired():
    recommendations = parse_recommendations('[{"name": "Basil",}, {"name": "Mint"},]')

    assert [r.name for r in recommendations] == ["Basil", "Mint"]


def test_truncated_answer_is_closed():
    recommendations = parse_recommendations('[{"name": "Basil", "companion_plants": ["Tomato",')

    assert recommendations[0].name == "Basil"
    assert recommendations[0].companion_plants == ["Tomato"]


def test_malformed_items_are_skipped():
    recommendations = parse_recommendations('[{"name": "Basil"}, {"type": "herb"}, "oops"]')

    assert [r.name for r in recommendations] == ["Basil"]


def test_blank_answer_has_no_recommendations():
    assert parse_recommendations("   ") == []


def test_answer_without_json_is_an_error():
    with pytest.raises(RecommendationParseError):
        parse_recommendations("Sorry, I can only talk about gardening.")


def test_extract_json_block_prefers_the_array():
    content = 'Note {"ignored": true}\n[{"name": "Sage"}]'

    assert extract_json_block(content) == '[{"name": "Sage"}]'


def test_close_unbalanced_ignores_brackets_in_strings():
    assert close_unbalanced('[{"name": "x]') == '[{"name": "x]"}]'


# =============================================================================
# SERVICE
# =============================================================================

def _openai(content=ANSWER, configured=True):
    client = MagicMock(spec=OpenAIClient)
    client.is_configured = configured
    client.chat_completion = AsyncMock(return_value=content)
    return client


def _unsplash(search_photo=None, configured=True):
    client = MagicMock(spec=UnsplashClient)
    client.is_configured = configured
    client.search_photo = search_photo or AsyncMock(
        side_effect=lambda query: f"https://images.example/{query.split()[0].lower()}.jpg"
    )
    return client


def test_recommendations_with_images():
    openai = _openai()
    service = PlantRecommendationService(openai, _unsplash())

    result = _run(service.get_recommendations(_request(season="summer")))

    assert result.success is True
    assert [r.image_url for r in result.recommendations] == [
        "https://images.example/basil.jpg",
        "https://images.example/mint.jpg",
    ]
    assert result.meta.season == "summer"
    assert result.meta.location == "Unknown"
    assert result.meta.garden_type == "balcony"
    system_prompt, user_prompt = openai.chat_completion.await_args.args
    assert "(summer)" in system_prompt
    assert "User query: Easy herbs I can cook with" in user_prompt


def test_image_failures_do_not_fail_the_request():
    def search(query):
        if query.startswith("Mint"):
            raise ExternalAPIError("Rate limit exceeded for unsplash", api_name="unsplash")
        return "https://images.example/basil.jpg"

    service = PlantRecommendationService(_openai(), _unsplash(AsyncMock(side_effect=search)))

    result = _run(service.get_recommendations(_request()))

    assert result.success is True
    assert [r.image_url for r in result.recommendations] == ["https://images.example/basil.jpg", None]


def test_unconfigured_unsplash_leaves_images_empty():
    unsplash = _unsplash(configured=False)
    service = PlantRecommendationService(_openai(), unsplash)

    result = _run(service.get_recommendations(_request()))

    assert all(r.image_url is None for r in result.recommendations)
    unsplash.search_photo.assert_not_awaited()


def test_unconfigured_openai_reports_failure():
    openai = _openai(configured=False)
    service = PlantRecommendationService(openai)

    result = _run(service.get_recommendations(_request()))

    assert result.success is False
    assert result.error == "Plant recommendations are not available"
    openai.chat_completion.assert_not_awaited()


def test_openai_error_is_reported_in_band():
    openai = _openai()
    openai.chat_completion.side_effect = ExternalAPIError("Server error for openai (500)", api_name="openai")

    result = _run(PlantRecommendationService(openai).get_recommendations(_request()))

    assert result.success is False
    assert result.error == "Error calling OpenAI API"
    assert result.recommendations == []


def test_unreadable_answer_is_reported_in_band():
    service = PlantRecommendationService(_openai(content="No plants for you."))

    result = _run(service.get_recommendations(_request()))

    assert result.success is False
    assert result.error.startswith("Error generating recommendations")


def test_openai_client_reads_first_choice():
    client = OpenAIClient("https://api.openai.example/v1", "sk-test", model="gpt-4o-mini", max_tokens=500)
    client.post = AsyncMock(return_value={"choices": [{"message": {"content": "[]"}}]})

    assert _run(client.chat_completion("system", "user")) == "[]"
    endpoint = client.post.await_args.args[0]
    body = client.post.await_args.kwargs["data"]
    assert endpoint == "chat/completions"
    assert body["max_tokens"] == 500
    assert [m["role"] for m in body["messages"]] == ["system", "user"]


def test_openai_client_rejects_unexpected_response():
    client = OpenAIClient("https://api.openai.example/v1", "sk-test")
    client.post = AsyncMock(return_value={"error": "nope"})

    with pytest.raises(ExternalAPIError):
        _run(client.chat_completion("system", "user"))


def test_unsplash_client_returns_small_url_or_none():
    client = UnsplashClient("https://api.unsplash.example", "access-key")
    client.get = AsyncMock(return_value={"results": [{"urls": {"small": "https://images.example/s.jpg"}}]})
    assert _run(client.search_photo("Basil plant")) == "https://images.example/s.jpg"

    client.get = AsyncMock(return_value={"results": []})
    assert _run(client.search_photo("Unknown plant")) is None


# =============================================================================
# ENDPOINT
# =============================================================================

def test_recommendation_endpoint_wraps_result(client):
    service = PlantRecommendationService(_openai(), _unsplash())
    app.dependency_overrides[get_plant_recommendation_service] = lambda: service

    response = client.post(
        "/api/v1/plant-recommendations",
        json={"garden_type": "balcony", "message": "Easy herbs", "season": "spring"},
    )

    assert response.status_code == 200
    body = response.json()
    assert body["message"] == "Plant recommendations retrieved successfully"
    assert body["data"]["success"] is True
    assert [r["name"] for r in body["data"]["recommendations"]] == ["Basil", "Mint"]


def test_recommendation_endpoint_without_api_key(client):
    response = client.post("/api/v1/plant-recommendations", json={"garden_type": "balcony", "message": "Herbs"})

    assert response.status_code == 200
    body = response.json()
    assert body["message"] == "Plant recommendations could not be generated"
    assert body["data"]["success"] is False


def test_recommendation_endpoint_validates_request(client):
    response = client.post("/api/v1/plant-recommendations", json={"garden_type": "balcony"})

    assert response.status_code == 400
    assert response.json()["code"] == "VALIDATION_ERROR"
