# 📄 File: app/modules/ai_features/infrastructure/external/unsplash_client.py
# 🧭 Purpose (Layman Explanation):
# Finds a nice photo of a plant on Unsplash so suggestions come with a picture.
#
# 🧪 Purpose (Technical Summary):
# APIClient subclass for Unsplash photo search (Client-ID auth). Returns the
# small rendition URL of the first result, or None when nothing matches.
#
# 🔗 Dependencies:
# - app.shared.infrastructure.external_apis.APIClient (aiohttp + tenacity)
# - app.shared.config.settings (UNSPLASH_ACCESS_KEY, UNSPLASH_API_URL)
#
# 🔄 Connected Modules / Calls From:
# - app.modules.ai_features.domain.services.plant_recommendation_service
# - app.modules.ai_features.presentation.dependencies

from typing import Dict, Optional

from app.shared.config.settings import get_settings
from app.shared.infrastructure.external_apis import APIClient


class UnsplashClient(APIClient):

    def __init__(self, base_url: str, api_key: Optional[str], timeout: int = 10, max_retries: int = 3):
        super().__init__(
            base_url=base_url,
            api_key=api_key,
            api_name="unsplash",
            timeout=timeout,
            max_retries=max_retries,
        )

    @classmethod
    def from_settings(cls) -> "UnsplashClient":
        settings = get_settings()
        return cls(
            base_url=settings.UNSPLASH_API_URL,
            api_key=settings.UNSPLASH_ACCESS_KEY,
            timeout=settings.EXTERNAL_API_TIMEOUT,
            max_retries=settings.EXTERNAL_API_MAX_RETRIES,
        )

    def _get_default_headers(self) -> Dict[str, str]:
        headers = super()._get_default_headers()
        if self.api_key:
            headers["Authorization"] = f"Client-ID {self.api_key}"
        headers["Accept-Version"] = "v1"
        return headers

    async def search_photo(self, query: str) -> Optional[str]:
        """URL of the first photo matching ``query``."""
        response = await self.get("search/photos", params={"query": query, "per_page": 1})
        results = response.get("results") if isinstance(response, dict) else None
        if not results:
            return None
        return (results[0].get("urls") or {}).get("small")
