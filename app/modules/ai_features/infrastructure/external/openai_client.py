# 📄 File: app/modules/ai_features/infrastructure/external/openai_client.py
# 🧭 Purpose (Layman Explanation):
# Sends our gardening question to OpenAI and brings back the assistant's written answer.
#
# 🧪 Purpose (Technical Summary):
# APIClient subclass for the OpenAI chat completions endpoint (bearer auth).
# Returns the first choice's message content as plain text.
#
# 🔗 Dependencies:
# - app.shared.infrastructure.external_apis.APIClient (aiohttp + tenacity)
# - app.shared.config.settings (OPENAI_* settings)
#
# 🔄 Connected Modules / Calls From:
# - app.modules.ai_features.domain.services.plant_recommendation_service
# - app.modules.ai_features.presentation.dependencies

import logging
from typing import Dict, Optional

from app.shared.config.settings import get_settings
from app.shared.core.exceptions import ExternalAPIError
from app.shared.infrastructure.external_apis import APIClient

logger = logging.getLogger(__name__)


class OpenAIClient(APIClient):

    def __init__(
        self,
        base_url: str,
        api_key: Optional[str],
        model: str = "gpt-4o-mini",
        temperature: float = 0.7,
        max_tokens: Optional[int] = None,
        timeout: int = 30,
        max_retries: int = 3,
    ):
        super().__init__(
            base_url=base_url,
            api_key=api_key,
            api_name="openai",
            timeout=timeout,
            max_retries=max_retries,
        )
        self.model = model
        self.temperature = temperature
        self.max_tokens = max_tokens

    @classmethod
    def from_settings(cls) -> "OpenAIClient":
        settings = get_settings()
        return cls(
            base_url=settings.OPENAI_API_URL,
            api_key=settings.OPENAI_API_KEY,
            model=settings.OPENAI_MODEL,
            temperature=settings.OPENAI_TEMPERATURE,
            max_tokens=settings.OPENAI_MAX_TOKENS,
            # completions are slow compared to the other providers
            timeout=max(settings.EXTERNAL_API_TIMEOUT, 30),
            max_retries=settings.EXTERNAL_API_MAX_RETRIES,
        )

    def _get_default_headers(self) -> Dict[str, str]:
        headers = super()._get_default_headers()
        headers["Content-Type"] = "application/json"
        if self.api_key:
            headers["Authorization"] = f"Bearer {self.api_key}"
        return headers

    async def chat_completion(self, system_prompt: str, user_prompt: str) -> str:
        """Run one system + user exchange and return the reply text."""
        body = {
            "model": self.model,
            "messages": [
                {"role": "system", "content": system_prompt},
                {"role": "user", "content": user_prompt},
            ],
            "temperature": self.temperature,
        }
        if self.max_tokens:
            body["max_tokens"] = self.max_tokens

        logger.debug(f"Sending chat completion request to OpenAI ({self.model})")
        response = await self.post("chat/completions", data=body)

        try:
            return response["choices"][0]["message"]["content"] or ""
        except (KeyError, IndexError, TypeError) as e:
            raise ExternalAPIError("Unexpected response format from OpenAI", api_name=self.api_name) from e
