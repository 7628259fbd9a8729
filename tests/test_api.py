"""
HTTP level tests: response envelopes, error codes, search endpoints, adding
library plants to a garden plan, likes and reminders.
"""

from datetime import date
from unittest.mock import AsyncMock, patch
from uuid import uuid4

from sqlalchemy import func

from app.modules.garden_planning.infrastructure.database.plant_repository_impl import PlantRepositoryImpl
from app.shared.core.exceptions import RepositoryError

API = "/api/v1"
MODULES = "app.modules"


def _create_library_entry(client, **fields):
    payload = {"common_name": "Cherry Tomato", "plant_type": "Vegetable", "care_level": "Easy", **fields}
    response = client.post(f"{API}/plants-library", json=payload)
    assert response.status_code == 201
    return response.json()["data"]


def _create_garden_plan(client, **fields):
    payload = {"user_id": str(uuid4()), "name": "Kitchen Garden", "type": "Vegetable", **fields}
    response = client.post(f"{API}/garden-plans", json=payload)
    assert response.status_code == 201
    return response.json()["data"]


def _create_image(client):
    response = client.post(f"{API}/garden-images", json={"image_url": "https://img.example/1.jpg"})
    assert response.status_code == 201
    return response.json()["data"]


# =============================================================================
# ENVELOPES AND ERRORS
# =============================================================================

def test_create_returns_success_envelope(client):
    response = client.post(f"{API}/plants-library", json={"common_name": "Basil", "plant_type": "Herb"})

    assert response.status_code == 201
    body = response.json()
    assert set(body) == {"status", "message", "data", "timestamp"}
    assert body["status"] == 201
    assert body["message"] == "Plant created successfully"
    assert body["data"]["common_name"] == "Basil"
    assert body["data"]["id"]


def test_library_entry_round_trip(client):
    entry = _create_library_entry(client)

    fetched = client.get(f"{API}/plants-library/{entry['id']}")
    assert fetched.status_code == 200
    assert fetched.json()["data"]["common_name"] == "Cherry Tomato"

    updated = client.put(
        f"{API}/plants-library/{entry['id']}",
        json={"common_name": "Cherry Tomato", "plant_type": "Vegetable", "care_level": "Moderate"},
    )
    assert updated.status_code == 200
    assert updated.json()["data"]["care_level"] == "Moderate"

    deleted = client.delete(f"{API}/plants-library/{entry['id']}")
    assert deleted.status_code == 200
    assert deleted.json()["data"] is None

    assert client.get(f"{API}/plants-library/{entry['id']}").status_code == 404


def test_missing_resource_returns_not_found_envelope(client):
    response = client.get(f"{API}/plants-library/{uuid4()}")

    assert response.status_code == 404
    body = response.json()
    assert body["status"] == 404
    assert body["code"] == "RESOURCE_NOT_FOUND"
    assert "timestamp" in body
    assert "data" not in body


def test_malformed_id_returns_validation_envelope(client):
    response = client.get(f"{API}/plants-library/not-a-uuid")

    assert response.status_code == 400
    body = response.json()
    assert body["code"] == "VALIDATION_ERROR"
    assert body["errors"][0]["field"] == "entry_id"


def test_invalid_temperature_range_is_rejected(client):
    response = client.post(
        f"{API}/plants-library",
        json={"common_name": "Basil", "temperature_min": 30, "temperature_max": 10},
    )

    assert response.status_code == 400
    assert response.json()["code"] == "VALIDATION_ERROR"


def test_missing_required_field_returns_validation_envelope(client):
    response = client.post(f"{API}/garden-plans", json={"user_id": str(uuid4()), "name": "Kitchen Garden"})

    assert response.status_code == 400
    body = response.json()
    assert body["code"] == "VALIDATION_ERROR"
    assert "type" in [error["field"] for error in body["errors"]]
    assert client.get(f"{API}/garden-plans/all").json()["data"] == []


def test_page_size_above_maximum_is_rejected(client):
    response = client.get(f"{API}/plants-library", params={"size": 1000})

    assert response.status_code == 400
    assert response.json()["code"] == "VALIDATION_ERROR"


def test_unknown_sort_direction_is_rejected(client):
    response = client.get(f"{API}/garden-plans", params={"direction": "sideways"})

    assert response.status_code == 400


# =============================================================================
# SEARCH ENDPOINTS
# =============================================================================

def test_library_listing_is_alphabetical_by_default(client):
    _create_library_entry(client, common_name="Tomatillo")
    _create_library_entry(client, common_name="Basil", plant_type="Herb")

    page = client.get(f"{API}/plants-library").json()["data"]

    assert [e["common_name"] for e in page["content"]] == ["Basil", "Tomatillo"]
    assert page["total_elements"] == 2
    assert page["page"] == 0
    assert page["size"] == 10


def test_advanced_library_search_combines_filters(client):
    _create_library_entry(client, common_name="Cherry Tomato", care_level="Easy")
    _create_library_entry(client, common_name="Tomatillo", care_level="Moderate")

    response = client.get(
        f"{API}/plants-library/search/advanced",
        params={"common_name": "tomat", "care_level": "EASY"},
    )

    assert response.status_code == 200
    assert [e["common_name"] for e in response.json()["data"]["content"]] == ["Cherry Tomato"]


def test_advanced_library_search_without_match_returns_empty_page(client):
    _create_library_entry(client)

    response = client.get(f"{API}/plants-library/search/advanced", params={"common_name": "cactus"})

    assert response.status_code == 200
    page = response.json()["data"]
    assert page["content"] == []
    assert page["total_elements"] == 0
    assert page["total_pages"] == 0


def test_advanced_library_search_filters_size_apart_from_page_size(client):
    _create_library_entry(client, common_name="Dwarf Tomato", size="Small")
    _create_library_entry(client, common_name="Beefsteak Tomato", size="Large")

    response = client.get(
        f"{API}/plants-library/search/advanced",
        params={"plant_size": "small", "size": 1},
    )

    page = response.json()["data"]
    assert [e["common_name"] for e in page["content"]] == ["Dwarf Tomato"]
    assert page["size"] == 1
    assert page["total_elements"] == 1


def test_plant_search_falls_back_when_ranking_fails(client):
    plan = _create_garden_plan(client)
    client.post(f"{API}/plants", json={"garden_plan_id": plan["id"], "name": "Basil", "type": "Herb"})
    client.post(f"{API}/plants", json={"garden_plan_id": plan["id"], "name": "Tomato", "type": "Vegetable"})

    failing = AsyncMock(side_effect=RepositoryError("similarity() is not available"))
    with patch.object(PlantRepositoryImpl, "search_ranked", failing):
        response = client.get(f"{API}/plants/search/advanced", params={"query": "basil"})

    assert response.status_code == 200
    assert [p["name"] for p in response.json()["data"]["content"]] == ["Basil"]
    failing.assert_awaited_once()


def _similarity_score(column, value, *weights):
    # similarity() needs PostgreSQL pg_trgm; SQLite rejects it when the statement runs
    return func.similarity(column, value or "")


def test_garden_plan_search_falls_back_when_ranked_sql_fails(client):
    _create_garden_plan(client, name="Kitchen Garden")
    _create_garden_plan(client, name="Rose Garden", type="Flower")

    with patch(f"{MODULES}.garden_planning.infrastructure.database.garden_plan_repository_impl.match_score",
               _similarity_score):
        response = client.get(f"{API}/garden-plans/search/advanced", params={"query": "kitchen", "name": "kitchen"})

    assert response.status_code == 200
    assert [p["name"] for p in response.json()["data"]["content"]] == ["Kitchen Garden"]
    follow_up = client.get(f"{API}/garden-plans/all")
    assert follow_up.status_code == 200
    assert len(follow_up.json()["data"]) == 2


def test_profile_search_falls_back_when_ranked_sql_fails(client):
    for full_name in ("Jane Smith", "John Doe"):
        assert client.post(f"{API}/profiles", json={"full_name": full_name}).status_code == 201

    with patch(f"{MODULES}.user_management.infrastructure.database.profile_repository_impl.match_score",
               _similarity_score):
        response = client.get(f"{API}/profiles/search/advanced", params={"query": "jane", "full_name": "jane"})

    assert response.status_code == 200
    assert [p["full_name"] for p in response.json()["data"]["content"]] == ["Jane Smith"]
    assert response.json()["data"]["total_elements"] == 1


def test_plant_relevance_search_ranks_exact_match_first(client):
    plan = _create_garden_plan(client)
    for name in ("Thai Basil", "Basil Genovese", "Basil"):
        client.post(f"{API}/plants", json={"garden_plan_id": plan["id"], "name": name, "type": "Herb"})

    response = client.get(f"{API}/plants/search/advanced", params={"name": "basil"})

    assert [p["name"] for p in response.json()["data"]["content"]] == ["Basil", "Basil Genovese", "Thai Basil"]


# =============================================================================
# ADD FROM LIBRARY
# =============================================================================

def test_add_from_library_places_plants_on_free_cells(client):
    entry = _create_library_entry(client, watering_frequency="Daily", sunlight_requirement="Full sun")
    plan = _create_garden_plan(client)
    payload = {"garden_plan_id": plan["id"], "plants_library_id": entry["id"]}

    first = client.post(f"{API}/plants/from-library", json=payload)
    second = client.post(f"{API}/plants/from-library", json=payload)

    assert first.status_code == 201
    assert first.json()["message"] == "Plant added successfully"
    plant = first.json()["data"]
    assert plant["name"] == "Cherry Tomato"
    assert plant["type"] == "Vegetable"
    assert plant["watering_frequency"] == "Daily"
    assert (plant["position_x"], plant["position_y"]) == (0, 0)
    assert (second.json()["data"]["position_x"], second.json()["data"]["position_y"]) == (1, 0)


def test_add_from_library_unknown_entry_is_not_found(client):
    plan = _create_garden_plan(client)

    response = client.post(
        f"{API}/plants/from-library",
        json={"garden_plan_id": plan["id"], "plants_library_id": str(uuid4())},
    )

    assert response.status_code == 404
    assert response.json()["code"] == "RESOURCE_NOT_FOUND"


# =============================================================================
# LIKES
# =============================================================================

def test_duplicate_like_returns_conflict(client):
    image = _create_image(client)
    payload = {"image_id": image["id"], "user_id": str(uuid4())}

    assert client.post(f"{API}/image-likes", json=payload).status_code == 201
    duplicate = client.post(f"{API}/image-likes", json=payload)

    assert duplicate.status_code == 409
    assert duplicate.json()["code"] == "DUPLICATE_RESOURCE"
    assert client.get(f"{API}/image-likes/image/{image['id']}/count").json()["data"] == 1


def test_unlike_is_idempotent(client):
    image = _create_image(client)
    user_id = str(uuid4())
    client.post(f"{API}/image-likes", json={"image_id": image["id"], "user_id": user_id})

    first = client.delete(f"{API}/image-likes/image/{image['id']}/user/{user_id}")
    second = client.delete(f"{API}/image-likes/image/{image['id']}/user/{user_id}")

    assert (first.status_code, first.json()["data"]) == (200, True)
    assert (second.status_code, second.json()["data"]) == (200, False)


def test_toggle_like(client):
    image = _create_image(client)
    user_id = str(uuid4())
    url = f"{API}/image-likes/image/{image['id']}/user/{user_id}"

    liked = client.post(f"{url}/toggle")
    assert liked.json()["data"] is True
    assert liked.json()["message"] == "Image liked successfully"
    assert client.get(url).json()["data"] is True

    unliked = client.post(f"{url}/toggle")
    assert unliked.json()["data"] is False
    assert client.get(url).json()["data"] is False


# =============================================================================
# REMINDERS AND HEALTH LOOKUPS
# =============================================================================

def test_complete_reminder(client):
    plan = _create_garden_plan(client)
    plant = client.post(
        f"{API}/plants", json={"garden_plan_id": plan["id"], "name": "Basil", "type": "Herb"}
    ).json()["data"]
    reminder = client.post(
        f"{API}/plant-reminders",
        json={
            "plant_id": plant["id"],
            "garden_plan_id": plan["id"],
            "reminder_type": "Watering",
            "reminder_date": date(2025, 5, 10).isoformat(),
        },
    ).json()["data"]
    assert reminder["is_completed"] is False

    response = client.put(f"{API}/plant-reminders/{reminder['id']}/complete")

    assert response.status_code == 200
    assert response.json()["data"]["is_completed"] is True


def test_complete_unknown_reminder_is_not_found(client):
    assert client.put(f"{API}/plant-reminders/{uuid4()}/complete").status_code == 404


def test_pests_for_unknown_library_entry_is_empty(client):
    response = client.get(f"{API}/pests/plant-library/{uuid4()}")

    assert response.status_code == 200
    assert response.json()["data"] == []


# =============================================================================
# SERVICE ENDPOINTS
# =============================================================================

def test_liveness_check(client):
    response = client.get(f"{API}/health/live")

    assert response.status_code == 200
    assert response.text == "OK"


def test_health_check_reports_database_status(client):
    unhealthy = AsyncMock(return_value={"status": "unhealthy", "error": "connection refused"})
    with patch("app.api.v1.health.db_health_check", unhealthy):
        response = client.get(f"{API}/health")

    assert response.status_code == 503
    assert response.json()["status"] == "unhealthy"


def test_responses_carry_api_version_header(client):
    response = client.get("/")

    assert response.status_code == 200
    assert response.headers["X-API-Version"] == "v1"
