"""
Activity feed endpoints: recording, filtering by gardener, garden plan and
type, and the not found and validation paths.
"""

from uuid import uuid4

API = "/api/v1"


def _create_garden_plan(client, user_id):
    response = client.post(
        f"{API}/garden-plans",
        json={"user_id": user_id, "name": "Kitchen Garden", "type": "Vegetable"},
    )
    assert response.status_code == 201
    return response.json()["data"]


def _record(client, user_id, activity_type="Watering", description="Watered the tomatoes", **fields):
    payload = {"user_id": user_id, "activity_type": activity_type, "description": description, **fields}
    response = client.post(f"{API}/activities", json=payload)
    assert response.status_code == 201
    return response.json()["data"]


# =============================================================================
# CRUD
# =============================================================================

def test_record_activity(client):
    user_id = str(uuid4())

    response = client.post(
        f"{API}/activities",
        json={"user_id": user_id, "activity_type": "  Harvesting ", "description": "First cherry tomatoes"},
    )

    assert response.status_code == 201
    body = response.json()
    assert body["message"] == "Activity created successfully"
    assert body["data"]["activity_type"] == "Harvesting"
    assert body["data"]["garden_plan_id"] is None
    assert body["data"]["created_at"]


def test_activity_round_trip(client):
    user_id = str(uuid4())
    activity = _record(client, user_id)

    fetched = client.get(f"{API}/activities/{activity['id']}")
    assert fetched.status_code == 200
    assert fetched.json()["data"]["description"] == "Watered the tomatoes"

    updated = client.put(
        f"{API}/activities/{activity['id']}",
        json={"user_id": user_id, "activity_type": "Watering", "description": "Watered the peppers too"},
    )
    assert updated.status_code == 200
    assert updated.json()["data"]["description"] == "Watered the peppers too"
    assert updated.json()["data"]["created_at"][:19] == activity["created_at"][:19]

    deleted = client.delete(f"{API}/activities/{activity['id']}")
    assert deleted.status_code == 200
    assert deleted.json()["message"] == "Activity deleted successfully"

    assert client.get(f"{API}/activities/{activity['id']}").status_code == 404


def test_unknown_activity_is_not_found(client):
    missing = uuid4()

    assert client.get(f"{API}/activities/{missing}").status_code == 404
    assert client.delete(f"{API}/activities/{missing}").status_code == 404
    response = client.put(
        f"{API}/activities/{missing}",
        json={"user_id": str(uuid4()), "activity_type": "Watering", "description": "Nothing"},
    )
    assert response.status_code == 404
    assert response.json()["code"] == "RESOURCE_NOT_FOUND"


def test_blank_description_is_rejected(client):
    response = client.post(
        f"{API}/activities",
        json={"user_id": str(uuid4()), "activity_type": "Watering", "description": "   "},
    )

    assert response.status_code == 400
    body = response.json()
    assert body["code"] == "VALIDATION_ERROR"
    assert body["errors"][0]["field"] == "description"
    assert client.get(f"{API}/activities/all").json()["data"] == []


def test_missing_user_is_rejected(client):
    response = client.post(f"{API}/activities", json={"activity_type": "Watering", "description": "Watered"})

    assert response.status_code == 400
    assert response.json()["code"] == "VALIDATION_ERROR"


# =============================================================================
# FILTERS
# =============================================================================

def test_listing_is_newest_first(client):
    user_id = str(uuid4())
    _record(client, user_id, description="First")
    _record(client, user_id, description="Second")

    page = client.get(f"{API}/activities").json()["data"]

    assert [a["description"] for a in page["content"]] == ["Second", "First"]
    assert page["total_elements"] == 2


def test_activities_by_user_and_type(client):
    user_id = str(uuid4())
    _record(client, user_id, activity_type="Watering")
    _record(client, user_id, activity_type="Planting", description="Planted basil")
    _record(client, str(uuid4()), activity_type="Watering")

    by_user = client.get(f"{API}/activities/user/{user_id}")
    assert by_user.status_code == 200
    assert by_user.json()["message"] == "Successfully retrieved activities for user"
    assert by_user.json()["data"]["total_elements"] == 2

    by_type = client.get(f"{API}/activities/user/{user_id}/type/Planting").json()["data"]
    assert [a["description"] for a in by_type["content"]] == ["Planted basil"]

    # exact match only
    assert client.get(f"{API}/activities/user/{user_id}/type/plant").json()["data"]["content"] == []


def test_activities_by_garden_plan_and_type(client):
    user_id = str(uuid4())
    plan = _create_garden_plan(client, user_id)
    _record(client, user_id, activity_type="Harvesting", description="Picked beans", garden_plan_id=plan["id"])
    _record(client, user_id, activity_type="Watering", garden_plan_id=plan["id"])
    _record(client, user_id, activity_type="Harvesting", description="Elsewhere")

    by_plan = client.get(f"{API}/activities/garden-plan/{plan['id']}").json()["data"]
    assert by_plan["total_elements"] == 2

    by_type = client.get(f"{API}/activities/garden-plan/{plan['id']}/type/Harvesting").json()["data"]
    assert [a["description"] for a in by_type["content"]] == ["Picked beans"]


def test_activities_by_malformed_user_id_is_rejected(client):
    response = client.get(f"{API}/activities/user/not-a-uuid")

    assert response.status_code == 400
    assert response.json()["errors"][0]["field"] == "user_id"
