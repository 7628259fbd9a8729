# 📄 File: app/modules/plant_library/infrastructure/external/perenual_client.py
# 🧭 Purpose (Layman Explanation):
# Looks plants, plant details and garden pests up in the Perenual plant encyclopedia
# online, after checking that the search words we were given are safe to send.
#
# 🧪 Purpose (Technical Summary):
# APIClient subclass for the Perenual API (species list v2, species details v2,
# pest/disease list). The key travels as the ``key`` query parameter; booleans are
# sent as 1/0 and empty filters are dropped. Only perenual.com hosts are called.
#
# 🔗 Dependencies:
# - app.shared.infrastructure.external_apis.APIClient (aiohttp + tenacity)
# - app.shared.config.settings (PLANT_API_KEY, PLANT_API_URL)
#
# 🔄 Connected Modules / Calls From:
# - app.modules.plant_library.domain.services.external_plant_service
# - app.modules.plant_library.presentation.dependencies

import logging
from typing import Any, Dict, Optional
from urllib.parse import urlparse

from app.shared.config.settings import get_settings
from app.shared.core.exceptions import ExternalAPIError, ServiceNotConfiguredError, ValidationError
from app.shared.infrastructure.external_apis import APIClient

logger = logging.getLogger(__name__)

SPECIES_LIST_ENDPOINT = "v2/species-list"
SPECIES_DETAILS_ENDPOINT = "v2/species/details/{plant_id}"
PEST_DISEASE_LIST_ENDPOINT = "pest-disease-list"

TRUSTED_HOSTS = ("perenual.com",)
PLACEHOLDER_KEY = "your_api_key_here"

# characters that never belong in a plant name search
FORBIDDEN_QUERY_FRAGMENTS = ("<", ">", '"', "'", ";", "--")


def validate_search_query(query: Optional[str]) -> Optional[str]:
    """Blank queries are dropped; markup or SQL-looking text is rejected."""
    if query is None or not query.strip():
        return None
    if any(fragment in query for fragment in FORBIDDEN_QUERY_FRAGMENTS):
        raise ValidationError("Invalid characters in search query", field="q")
    return query.strip()


def is_trusted_url(url: str) -> bool:
    host = urlparse(url).hostname or ""
    return any(host == trusted or host.endswith(f".{trusted}") for trusted in TRUSTED_HOSTS)


def to_query_params(filters: Dict[str, Any]) -> Dict[str, Any]:
    """Drop unset filters and encode booleans the way Perenual expects them."""
    params: Dict[str, Any] = {}
    for name, value in filters.items():
        if value is None:
            continue
        params[name] = (1 if value else 0) if isinstance(value, bool) else value
    return params


class PerenualClient(APIClient):

    def __init__(self, base_url: str, api_key: Optional[str], timeout: int = 10, max_retries: int = 3):
        super().__init__(
            base_url=base_url,
            api_key=api_key,
            api_name="perenual",
            timeout=timeout,
            max_retries=max_retries,
        )

    @classmethod
    def from_settings(cls) -> "PerenualClient":
        settings = get_settings()
        client = cls(
            base_url=settings.PLANT_API_URL,
            api_key=settings.PLANT_API_KEY,
            timeout=settings.EXTERNAL_API_TIMEOUT,
            max_retries=settings.EXTERNAL_API_MAX_RETRIES,
        )
        if not client.is_configured:
            logger.warning("Perenual API key is not configured properly. Plant data lookups will not work.")
        return client

    @property
    def is_configured(self) -> bool:
        return bool(self.api_key and self.api_key.strip()) and self.api_key != PLACEHOLDER_KEY

    async def _fetch(self, endpoint: str, params: Dict[str, Any]) -> Dict[str, Any]:
        if not self.is_configured:
            raise ServiceNotConfiguredError("Plant data API key is not configured properly", service=self.api_name)
        if not is_trusted_url(self.base_url):
            raise ExternalAPIError("Untrusted domain for plant data API", api_name=self.api_name)

        logger.debug(f"Calling Perenual {endpoint} with filters {sorted(params)}")
        return await self.get(endpoint, params={**params, "key": self.api_key})

    async def list_species(self, filters: Dict[str, Any]) -> Dict[str, Any]:
        filters = {**filters, "q": validate_search_query(filters.get("q"))}
        return await self._fetch(SPECIES_LIST_ENDPOINT, to_query_params(filters))

    async def get_species_details(self, plant_id: int) -> Dict[str, Any]:
        return await self._fetch(SPECIES_DETAILS_ENDPOINT.format(plant_id=plant_id), {})

    async def list_pests_and_diseases(self, filters: Dict[str, Any]) -> Dict[str, Any]:
        filters = {**filters, "q": validate_search_query(filters.get("q"))}
        return await self._fetch(PEST_DISEASE_LIST_ENDPOINT, to_query_params(filters))
