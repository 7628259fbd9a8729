# 📄 File: app/shared/infrastructure/external_apis/api_client.py

# 🧭 Purpose (Layman Explanation):
# This file creates a smart HTTP client that knows how to talk to outside services
# (weather forecasts, the AI assistant, photo and plant data) reliably, retrying
# briefly when the network hiccups and reporting clear errors when they fail.

# 🧪 Purpose (Technical Summary):
# Generic async HTTP client with retry/backoff for transport failures, status
# code to exception mapping, and structured call logging for all external API
# integrations.

# 🔗 Dependencies:
# - aiohttp: Async HTTP client
# - tenacity: Retry logic and backoff strategies

# 🔄 Connected Modules / Calls From:
# Used by: World Weather Online client, OpenAI client, Unsplash client, Perenual client

import asyncio
import logging
import time
from typing import Any, Dict, Optional

import aiohttp
from aiohttp import ClientSession, ClientTimeout
from tenacity import (
    AsyncRetrying,
    before_sleep_log,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from app.shared.core.exceptions import APITimeoutError, ExternalAPIError
from app.shared.utils.logging import get_logger

logger = get_logger(__name__)

# tenacity logs through a standard library logger
_retry_logger = logging.getLogger(__name__)

RETRYABLE_ERRORS = (aiohttp.ClientConnectionError, asyncio.TimeoutError)


class APIClient:
    """
    Generic async HTTP client for external API integrations.

    Features:
    - Automatic retry with exponential backoff on connection errors and timeouts
    - HTTP status handling mapped onto the application exception hierarchy
    - Request/response logging with duration

    Subclasses override ``_get_default_headers`` for their auth scheme.
    """

    def __init__(
        self,
        base_url: str,
        api_key: Optional[str],
        api_name: str,
        timeout: int = 10,
        max_retries: int = 3,
    ):
        """Initialize API client with configuration."""
        self.base_url = base_url.rstrip('/')
        self.api_key = api_key
        self.api_name = api_name
        self.timeout = timeout
        self.max_retries = max(1, max_retries)

        self.session: Optional[ClientSession] = None

    async def initialize(self):
        """Initialize the client session."""
        if self.session is not None and not self.session.closed:
            return

        self.session = ClientSession(
            timeout=ClientTimeout(total=self.timeout),
            headers=self._get_default_headers(),
        )
        logger.info(f"API client initialized for {self.api_name}")

    async def close(self):
        """Close the underlying HTTP session."""
        if self.session is not None and not self.session.closed:
            await self.session.close()
        self.session = None

    async def __aenter__(self):
        await self.initialize()
        return self

    async def __aexit__(self, exc_type, exc, tb):
        await self.close()

    def _get_default_headers(self) -> Dict[str, str]:
        """Get default headers for requests."""
        return {
            'User-Agent': f'GardenPlanner/1.0 ({self.api_name}-client)',
            'Accept': 'application/json',
        }

    def _url(self, endpoint: str) -> str:
        return f"{self.base_url}/{endpoint.lstrip('/')}"

    @property
    def is_configured(self) -> bool:
        return bool(self.api_key)

    async def _make_request(
        self,
        method: str,
        endpoint: str,
        params: Optional[Dict[str, Any]] = None,
        data: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> Any:
        """Make HTTP request with retry logic."""
        await self.initialize()
        url = self._url(endpoint)

        try:
            async for attempt in AsyncRetrying(
                stop=stop_after_attempt(self.max_retries),
                wait=wait_exponential(multiplier=1, min=1, max=10),
                retry=retry_if_exception_type(RETRYABLE_ERRORS),
                before_sleep=before_sleep_log(_retry_logger, logging.WARNING),
                reraise=True,
            ):
                with attempt:
                    return await self._send(method, url, params, data, headers)
        except ExternalAPIError:
            raise
        except Exception as e:
            transformed = self._transform_exception(e, method, url)
            if transformed is e:
                raise
            raise transformed from e

    async def _send(
        self,
        method: str,
        url: str,
        params: Optional[Dict[str, Any]],
        data: Optional[Dict[str, Any]],
        headers: Optional[Dict[str, str]],
    ) -> Any:
        """Execute a single HTTP request."""
        request_kwargs: Dict[str, Any] = {'params': params, 'headers': headers}
        if data is not None:
            request_kwargs['json'] = data

        start_time = time.time()
        status_code = None
        try:
            async with self.session.request(method, url, **request_kwargs) as response:
                status_code = response.status
                await self._handle_response_status(response)
                try:
                    return await response.json(content_type=None)
                except ValueError:
                    # Fallback to text if JSON parsing fails
                    return {'raw_response': await response.text()}
        finally:
            logger.log_external_api_call(
                api_name=self.api_name,
                endpoint=url,
                method=method,
                status_code=status_code,
                duration_ms=(time.time() - start_time) * 1000,
                success=status_code is not None and 200 <= status_code < 300,
            )

    async def _handle_response_status(self, response: aiohttp.ClientResponse):
        """Handle HTTP response status codes."""
        if 200 <= response.status < 300:
            return
        elif response.status in (401, 403):
            raise ExternalAPIError(
                f"Authentication failed for {self.api_name}",
                api_name=self.api_name,
            )
        elif response.status == 429:
            retry_after = response.headers.get('Retry-After', '60')
            raise ExternalAPIError(
                f"Rate limit exceeded for {self.api_name}. Retry after {retry_after} seconds.",
                api_name=self.api_name,
            )
        else:
            response_text = await response.text()
            kind = "Client" if response.status < 500 else "Server"
            # Provider text stays in details (logged), never in the client-facing message
            raise ExternalAPIError(
                f"{kind} error for {self.api_name} ({response.status})",
                api_name=self.api_name,
                details={"upstream_status": response.status, "response_body": response_text[:200]},
            )

    def _transform_exception(self, exception: Exception, method: str, url: str) -> Exception:
        """Transform exceptions to appropriate API exceptions."""
        if isinstance(exception, asyncio.TimeoutError):
            return APITimeoutError(f"Timeout for {self.api_name}: {method} {url}", api_name=self.api_name)
        elif isinstance(exception, aiohttp.ClientError):
            return ExternalAPIError(f"Client error for {self.api_name}: {exception}", api_name=self.api_name)
        else:
            return exception

    async def get(
        self,
        endpoint: str,
        params: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> Any:
        """Make GET request."""
        return await self._make_request('GET', endpoint, params=params, headers=headers)

    async def post(
        self,
        endpoint: str,
        data: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> Any:
        """Make POST request with a JSON body."""
        return await self._make_request('POST', endpoint, data=data, headers=headers)
