"""
External plant data tests: query checks, parameter encoding, the Perenual
client and service with the provider mocked out, and the /plants/external
endpoints.
"""

import asyncio
from unittest.mock import AsyncMock

import pytest

from app.main import app
from app.modules.plant_library.domain.services.external_plant_service import ExternalPlantService
from app.modules.plant_library.infrastructure.external.perenual_client import (
    PerenualClient,
    is_trusted_url,
    to_query_params,
    validate_search_query,
)
from app.modules.plant_library.presentation.api.schemas.external_plant_schemas import (
    DiseasePestFilters,
    ExternalPlantFilters,
)
from app.modules.plant_library.presentation.dependencies import get_perenual_client
from app.shared.core.exceptions import (
    ExternalAPIError,
    NotFoundError,
    ServiceNotConfiguredError,
    ValidationError,
)

BASE_URL = "https://perenual.com/api"
API = "/api/v1/plants/external"

SPECIES_PAGE = {
    "data": [
        {
            "id": 1,
            "common_name": "European Silver Fir",
            "scientific_name": ["Abies alba"],
            "other_name": ["Common Silver Fir"],
            "cycle": "Perennial",
            "watering": "Frequent",
            "sunlight": ["full sun"],
            "default_image": {"license": 45, "thumbnail": "https://perenual.example/fir-thumb.jpg"},
        },
    ],
    "to": 1,
    "per_page": 30,
    "current_page": 1,
    "from": 1,
    "last_page": 1,
    "total": 1,
}

SPECIES_DETAILS = {
    "id": 1,
    "common_name": "European Silver Fir",
    "scientific_name": ["Abies alba"],
    "family": "Pinaceae",
    "type": "tree",
    "care_level": "Medium",
    "hardiness": {"min": "7", "max": "7"},
    "indoor": False,
    "poisonous_to_pets": False,
    "propagation": ["Cutting"],
}

PEST_PAGE = {
    "data": [
        {
            "id": 3,
            "common_name": "Aphids",
            "scientific_name": "Aphidoidea",
            "host": ["Roses", "Tomatoes"],
            "description": [{"subtitle": "Overview", "description": "Small sap-sucking insects."}],
            "solution": [{"subtitle": "Soap spray", "description": "Spray with insecticidal soap."}],
            "images": [{"small_url": "https://perenual.example/aphid.jpg"}],
        },
    ],
    "total": 1,
    "current_page": 1,
    "last_page": 1,
    "per_page": 30,
}


def _run(coro):
    return asyncio.run(coro)


def _client(payload=None, api_key="perenual-key", base_url=BASE_URL):
    client = PerenualClient(base_url, api_key)
    client.get = AsyncMock(return_value=payload if payload is not None else SPECIES_PAGE)
    return client


# =============================================================================
# QUERY CHECKS AND ENCODING
# =============================================================================

def test_search_query_is_trimmed_and_blank_dropped():
    assert validate_search_query("  basil ") == "basil"
    assert validate_search_query("   ") is None
    assert validate_search_query(None) is None


@pytest.mark.parametrize("query", ["<script>", "fir'; DROP", 'say "hi"', "fir -- x"])
def test_search_query_rejects_markup_and_sql_fragments(query):
    with pytest.raises(ValidationError):
        validate_search_query(query)


def test_only_perenual_hosts_are_trusted():
    assert is_trusted_url("https://perenual.com/api")
    assert is_trusted_url("https://www.perenual.com/api")
    assert not is_trusted_url("https://evilperenual.com/api")
    assert not is_trusted_url("https://api.example/plants")


def test_query_params_drop_unset_filters_and_encode_booleans():
    params = to_query_params({"page": 2, "edible": True, "indoor": False, "cycle": None, "q": "fir"})

    assert params == {"page": 2, "edible": 1, "indoor": 0, "q": "fir"}


# =============================================================================
# CLIENT
# =============================================================================

def test_list_species_sends_key_and_filters():
    client = _client()

    _run(client.list_species(ExternalPlantFilters(page=2, poisonous=False, q=" fir ").model_dump()))

    endpoint = client.get.await_args.args[0]
    params = client.get.await_args.kwargs["params"]
    assert endpoint == "v2/species-list"
    assert params == {"page": 2, "poisonous": 0, "q": "fir", "key": "perenual-key"}


def test_species_details_endpoint_carries_the_id():
    client = _client(SPECIES_DETAILS)

    _run(client.get_species_details(42))

    assert client.get.await_args.args[0] == "v2/species/details/42"
    assert client.get.await_args.kwargs["params"] == {"key": "perenual-key"}


def test_pest_disease_list_endpoint():
    client = _client(PEST_PAGE)

    _run(client.list_pests_and_diseases(DiseasePestFilters(id=3).model_dump()))

    assert client.get.await_args.args[0] == "pest-disease-list"
    assert client.get.await_args.kwargs["params"] == {"id": 3, "page": 1, "key": "perenual-key"}


@pytest.mark.parametrize("api_key", [None, "", "  ", "your_api_key_here"])
def test_unconfigured_client_never_calls_out(api_key):
    client = _client(api_key=api_key)

    assert client.is_configured is False
    with pytest.raises(ServiceNotConfiguredError):
        _run(client.list_species({}))
    client.get.assert_not_awaited()


def test_untrusted_base_url_is_refused():
    client = _client(base_url="https://plants.example/api")

    with pytest.raises(ExternalAPIError):
        _run(client.get_species_details(1))
    client.get.assert_not_awaited()


# =============================================================================
# SERVICE
# =============================================================================

def test_plant_list_is_parsed():
    page = _run(ExternalPlantService(_client()).get_plant_list(ExternalPlantFilters()))

    assert page.total == 1
    assert page.from_ == 1
    assert page.data[0].common_name == "European Silver Fir"
    assert page.data[0].default_image.thumbnail == "https://perenual.example/fir-thumb.jpg"


def test_details_keep_unlisted_provider_fields():
    details = _run(ExternalPlantService(_client(SPECIES_DETAILS)).get_plant_details(1))

    assert details.family == "Pinaceae"
    assert details.hardiness == {"min": "7", "max": "7"}
    assert details.model_dump()["propagation"] == ["Cutting"]


def test_empty_details_payload_is_not_found():
    with pytest.raises(NotFoundError):
        _run(ExternalPlantService(_client({})).get_plant_details(999999))


def test_malformed_payload_is_an_external_api_error():
    service = ExternalPlantService(_client({"data": "not a list"}))

    with pytest.raises(ExternalAPIError) as raised:
        _run(service.get_plant_list(ExternalPlantFilters()))

    assert raised.value.message == "Failed to parse plant list"


def test_disease_pest_list_is_parsed():
    page = _run(ExternalPlantService(_client(PEST_PAGE)).get_disease_pest_list(DiseasePestFilters()))

    assert page.data[0].host == ["Roses", "Tomatoes"]
    assert page.data[0].solution[0].subtitle == "Soap spray"


# =============================================================================
# ENDPOINTS
# =============================================================================

@pytest.fixture
def perenual_client(client):
    provider = _client()

    async def override_get_perenual_client():
        yield provider

    app.dependency_overrides[get_perenual_client] = override_get_perenual_client
    yield client, provider


def test_plant_list_endpoint(perenual_client):
    client, provider = perenual_client

    response = client.get(API, params={"edible": "true", "cycle": "perennial", "hardiness": 7})

    assert response.status_code == 200
    body = response.json()
    assert body["message"] == "Successfully retrieved plants from external API"
    assert body["data"]["data"][0]["common_name"] == "European Silver Fir"
    assert body["data"]["from"] == 1
    params = provider.get.await_args.kwargs["params"]
    assert params["edible"] == 1
    assert params["cycle"] == "perennial"
    assert params["hardiness"] == 7


def test_plant_details_endpoint(perenual_client):
    client, provider = perenual_client
    provider.get.return_value = SPECIES_DETAILS

    response = client.get(f"{API}/1")

    assert response.status_code == 200
    assert response.json()["message"] == "Successfully retrieved plant details from external API"
    assert response.json()["data"]["care_level"] == "Medium"


def test_diseases_pests_endpoint(perenual_client):
    client, provider = perenual_client
    provider.get.return_value = PEST_PAGE

    response = client.get(f"{API}/diseases-pests", params={"q": "aphid"})

    assert response.status_code == 200
    assert response.json()["message"] == "Successfully retrieved diseases and pests from external API"
    assert response.json()["data"]["data"][0]["common_name"] == "Aphids"
    assert provider.get.await_args.args[0] == "pest-disease-list"


@pytest.mark.parametrize("params", [
    {"cycle": "weekly"},
    {"sunlight": "moonlight"},
    {"hardiness": 14},
    {"page": 0},
    {"order": "sideways"},
])
def test_invalid_filters_are_rejected_before_calling_out(perenual_client, params):
    client, provider = perenual_client

    response = client.get(API, params=params)

    assert response.status_code == 400
    assert response.json()["code"] == "VALIDATION_ERROR"
    provider.get.assert_not_awaited()


def test_unsafe_search_text_is_rejected(perenual_client):
    client, provider = perenual_client

    response = client.get(API, params={"q": "<b>fir</b>"})

    assert response.status_code == 400
    assert response.json()["message"] == "Invalid characters in search query"
    provider.get.assert_not_awaited()


def test_unknown_external_plant_is_not_found(perenual_client):
    client, provider = perenual_client
    provider.get.return_value = {}

    assert client.get(f"{API}/999999").status_code == 404


def test_endpoint_without_api_key_is_unavailable(client):
    response = client.get(API)

    assert response.status_code == 503
    assert response.json()["code"] == "CONFIGURATION_ERROR"


def test_garden_plant_routes_still_resolve(client):
    response = client.get("/api/v1/plants/all")

    assert response.status_code == 200
    assert response.json()["data"] == []
