from typing import Any

import httpx

from plagcheck.collaborators.base import BaseSourceFinder
from plagcheck.collaborators.exceptions import (
    ConfigurationError,
    ResponseParseError,
    UpstreamError,
    UpstreamNetworkError,
    UpstreamTimeoutError,
)
from plagcheck.collaborators.models import SourceMatch
from plagcheck.logging.logger import Log

_QUERY_MAX_CHARS = 500


class SerpApiSourceFinder(BaseSourceFinder):
    """Searches Google through SerpAPI for pages resembling a chunk."""

    ENDPOINT = "https://serpapi.com/search"

    def __init__(
        self,
        *,
        api_key: str,
        timeout_seconds: int = 10,
        num_results: int = 10,
        http_client: httpx.Client | None = None,
    ) -> None:
        self._api_key = api_key
        self._num_results = num_results
        self._http = http_client or httpx.Client(
            timeout=timeout_seconds,
            headers={"Accept": "application/json"},
        )

    def find_sources(self, chunk_text: str) -> list[SourceMatch]:
        if not self._api_key:
            raise ConfigurationError("Missing search API key (set SEARCH_API_KEY)")
        query = chunk_text[:_QUERY_MAX_CHARS].strip()
        if not query:
            return []

        data = self._request(query)
        results = self._parse_results(data)
        Log.debug(f"SerpAPI: {len(results)} results for '{query[:60]}'")
        return results

    def _request(self, query: str) -> Any:
        params = {
            "api_key": self._api_key,
            "q": query,
            "engine": "google",
            "num": str(self._num_results),
        }
        try:
            response = self._http.get(self.ENDPOINT, params=params)
        except httpx.TimeoutException as exc:
            raise UpstreamTimeoutError(f"SerpAPI timeout: {exc}") from exc
        except httpx.TransportError as exc:
            raise UpstreamNetworkError(f"SerpAPI network error: {exc}") from exc

        if response.status_code >= 400:
            raise UpstreamError(
                f"SerpAPI request failed: {response.status_code}",
                status_code=response.status_code,
            )
        try:
            return response.json()
        except ValueError as exc:
            raise ResponseParseError(f"SerpAPI returned invalid JSON: {exc}") from exc

    @staticmethod
    def _parse_results(data: Any) -> list[SourceMatch]:
        if not isinstance(data, dict):
            raise ResponseParseError("SerpAPI response must be an object")
        organic = data.get("organic_results") or []
        if not isinstance(organic, list):
            raise ResponseParseError("SerpAPI 'organic_results' must be a list")
        results: list[SourceMatch] = []
        for item in organic:
            if not isinstance(item, dict) or not item.get("link"):
                continue
            results.append(
                SourceMatch(
                    url=str(item["link"]),
                    title=item.get("title"),
                    snippet=item.get("snippet"),
                )
            )
        return results
