"""SerpApi client — transport shared by the flight and hotel search adapters."""

import logging
from typing import Any

import httpx

from app.config import PLACEHOLDER_SERPAPI_KEY, Settings
from app.exceptions import ConfigurationError, ParseError, ProviderError

logger = logging.getLogger(__name__)


class SerpApiClient:
    """Thin async wrapper around the SerpApi search endpoint."""

    SEARCH_PATH = "/search"

    def __init__(
        self,
        api_key: str | None,
        base_url: str = "https://serpapi.com",
        timeout: float = 30.0,
        client: httpx.AsyncClient | None = None,
    ):
        self._api_key = (api_key or "").strip()
        self._base_url = base_url
        self._timeout = timeout
        self._client = client

    @classmethod
    def from_settings(cls, settings: Settings) -> "SerpApiClient":
        return cls(
            api_key=settings.serpapi_api_key,
            base_url=settings.serpapi_base_url,
            timeout=settings.search_timeout_seconds,
        )

    @property
    def _search_url(self) -> str:
        return f"{self._base_url.rstrip('/')}{self.SEARCH_PATH}"

    @property
    def configured(self) -> bool:
        return bool(self._api_key) and self._api_key != PLACEHOLDER_SERPAPI_KEY

    async def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(base_url=self._base_url, timeout=self._timeout)
        return self._client

    async def search(self, params: dict[str, Any]) -> dict:
        """Run one search and return the decoded JSON object.

        Raises:
            ConfigurationError: no usable API key.
            ProviderError: network failure, timeout or non-2xx status.
            ParseError: body is not a JSON object.
        """
        if not self.configured:
            raise ConfigurationError("SerpApi key is not configured")

        client = await self._get_client()
        query = {**params, "api_key": self._api_key}
        engine = params.get("engine", "?")

        try:
            resp = await client.get(self._search_url, params=query)
            resp.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.error(f"SerpApi {engine} error: {e.response.status_code}")
            raise ProviderError(
                f"SerpApi returned {e.response.status_code}", status_code=e.response.status_code
            ) from e
        except httpx.RequestError as e:
            logger.error(f"SerpApi {engine} request error: {e}")
            raise ProviderError(f"SerpApi request failed: {e}") from e

        try:
            data = resp.json()
        except ValueError as e:
            raise ParseError("SerpApi returned a non-JSON body") from e

        if not isinstance(data, dict):
            raise ParseError(f"SerpApi returned {type(data).__name__}, expected an object")
        if data.get("error"):
            # SerpApi reports some failures with a 200 and an "error" field
            raise ProviderError(f"SerpApi error: {data['error']}")
        return data

    async def close(self):
        if self._client:
            await self._client.aclose()
            self._client = None
