import json

import httpx
import pytest

from plagcheck.collaborators.exceptions import (
    ConfigurationError,
    ResponseParseError,
    UpstreamError,
    UpstreamNetworkError,
    UpstreamTimeoutError,
)
from plagcheck.collaborators.serpapi_source_finder import SerpApiSourceFinder


def _finder(handler, api_key: str = "secret") -> SerpApiSourceFinder:  # type: ignore[no-untyped-def]
    client = httpx.Client(transport=httpx.MockTransport(handler))
    return SerpApiSourceFinder(api_key=api_key, num_results=5, http_client=client)


class TestSerpApiSourceFinder:
    def test_parses_organic_results(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(
                200,
                json={
                    "organic_results": [
                        {"link": "https://a.example", "title": "A", "snippet": "alpha"},
                        {"title": "no link"},
                        {"link": "https://b.example"},
                    ]
                },
            )

        results = _finder(handler).find_sources("coastal erosion")
        assert [r.url for r in results] == ["https://a.example", "https://b.example"]
        assert results[0].title == "A"
        assert results[0].snippet == "alpha"
        assert all(r.similarity_score == 0.0 for r in results)

    def test_sends_query_params(self) -> None:
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json={})

        _finder(handler).find_sources("  " + "q" * 700)
        params = seen[0].url.params
        assert seen[0].url.host == "serpapi.com"
        assert params["engine"] == "google"
        assert params["num"] == "5"
        assert params["api_key"] == "secret"
        assert len(params["q"]) <= 500

    def test_no_results_key_is_empty(self) -> None:
        assert _finder(lambda r: httpx.Response(200, json={})).find_sources("text") == []

    def test_blank_query_skips_request(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise AssertionError("no request expected")

        assert _finder(handler).find_sources("   ") == []

    def test_missing_key_raises(self) -> None:
        with pytest.raises(ConfigurationError, match="SEARCH_API_KEY"):
            _finder(lambda r: httpx.Response(200, json={}), api_key="").find_sources("text")

    @pytest.mark.parametrize("status", [401, 429, 500, 503])
    def test_error_status(self, status: int) -> None:
        finder = _finder(lambda r: httpx.Response(status, text="err"))
        with pytest.raises(UpstreamError, match=str(status)) as exc_info:
            finder.find_sources("text")
        assert exc_info.value.status_code == status

    def test_timeout(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ReadTimeout("slow", request=request)

        with pytest.raises(UpstreamTimeoutError):
            _finder(handler).find_sources("text")

    def test_network_error(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("refused", request=request)

        with pytest.raises(UpstreamNetworkError):
            _finder(handler).find_sources("text")

    def test_invalid_json(self) -> None:
        with pytest.raises(ResponseParseError):
            _finder(lambda r: httpx.Response(200, text="<html>")).find_sources("text")

    def test_unexpected_shape(self) -> None:
        body = json.dumps({"organic_results": "nope"})
        with pytest.raises(ResponseParseError, match="must be a list"):
            _finder(lambda r: httpx.Response(200, text=body)).find_sources("text")
