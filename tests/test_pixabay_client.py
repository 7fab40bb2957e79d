"""Tests for PixabayClient: request parameters and failure handling."""

from __future__ import annotations

import logging

import httpx
import pytest

from pixabay_search.domain.entities.image import Orientation, PixabayCategory
from pixabay_search.domain.entities.query import EnrichedQuery
from pixabay_search.infrastructure.sources import PIXABAY_API_URL, PixabayClient
from pixabay_search.shared.async_utils import CircuitBreaker

QUERY = EnrichedQuery(
    search_string="dental clinic healthcare medical",
    category=PixabayCategory.HEALTH,
    orientation=Orientation.HORIZONTAL,
    language_code="en",
)


class RecordingHandler:
    """MockTransport handler that records requests and replays one response."""

    def __init__(self, response=None, exc: Exception | None = None):
        self.requests: list[httpx.Request] = []
        self._response = response
        self._exc = exc

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self._exc is not None:
            raise self._exc
        if callable(self._response):
            return self._response(request)
        return self._response


def make_client(handler, **kwargs) -> PixabayClient:
    return PixabayClient(api_key="test-key", transport=httpx.MockTransport(handler), **kwargs)


class TestBuildParams:
    """Provider query parameters."""

    def setup_method(self):
        self.client = make_client(RecordingHandler())

    def test_full_params(self):
        query = EnrichedQuery("blue ocean", category=PixabayCategory.NATURE, color_filter="blue")

        assert self.client.build_params(query) == {
            "key": "test-key",
            "q": "blue ocean",
            "image_type": "photo",
            "lang": "en",
            "orientation": "horizontal",
            "order": "popular",
            "per_page": "50",
            "safesearch": "true",
            "category": "nature",
            "colors": "blue",
        }

    def test_optional_params_omitted(self):
        client = make_client(RecordingHandler(), safesearch=False)
        params = client.build_params(EnrichedQuery("grooming salon"))

        assert "category" not in params
        assert "colors" not in params
        assert params["safesearch"] == "false"

    @pytest.mark.parametrize(("per_page", "expected"), [(1, "3"), (20, "20"), (500, "200")])
    def test_per_page_clamped(self, per_page, expected):
        assert self.client.build_params(QUERY, per_page=per_page)["per_page"] == expected


class TestSearch:
    """Request execution and failure paths."""

    async def test_success(self, pixabay_response):
        handler = RecordingHandler(httpx.Response(200, json=pixabay_response))
        async with make_client(handler) as client:
            result = await client.search(QUERY)

        assert [c.image_id for c in result] == [101, 102, 103]
        assert result[0].likes == 120
        assert result[2].image_width == 1920
        assert result[0].to_dict() == pixabay_response["hits"][0]

        request = handler.requests[0]
        assert str(request.url).startswith(PIXABAY_API_URL)
        assert request.url.params["q"] == "dental clinic healthcare medical"
        assert request.url.params["category"] == "health"

    async def test_per_page_override(self, pixabay_response):
        handler = RecordingHandler(httpx.Response(200, json=pixabay_response))
        async with make_client(handler) as client:
            await client.search(QUERY, per_page=3)
        assert handler.requests[0].url.params["per_page"] == "3"

    async def test_empty_query_skips_request(self):
        handler = RecordingHandler(httpx.Response(200, json={"hits": []}))
        async with make_client(handler) as client:
            assert await client.search(EnrichedQuery("")) == []
        assert handler.requests == []

    async def test_http_error_status(self, caplog):
        handler = RecordingHandler(httpx.Response(500, text="boom"))
        async with make_client(handler) as client:
            with caplog.at_level(logging.ERROR):
                assert await client.search(QUERY) == []
        assert "500" in caplog.text

    async def test_bad_api_key_status(self):
        handler = RecordingHandler(httpx.Response(400, text="[ERROR 400] Invalid or missing API key"))
        async with make_client(handler) as client:
            assert await client.search(QUERY) == []

    async def test_timeout(self):
        handler = RecordingHandler(exc=httpx.ReadTimeout("timed out"))
        async with make_client(handler, timeout=0.5) as client:
            assert await client.search(QUERY) == []
            assert client.timeout == 0.5

    async def test_connection_error(self):
        handler = RecordingHandler(exc=httpx.ConnectError("dns failure"))
        async with make_client(handler) as client:
            assert await client.search(QUERY) == []

    async def test_invalid_json(self):
        handler = RecordingHandler(httpx.Response(200, content=b"<html>not json</html>"))
        async with make_client(handler) as client:
            assert await client.search(QUERY) == []

    @pytest.mark.parametrize(
        "body",
        [{"total": 0}, {"hits": None}, {"hits": "nope"}, ["not", "an", "object"]],
    )
    async def test_malformed_bodies(self, body):
        handler = RecordingHandler(httpx.Response(200, json=body))
        async with make_client(handler) as client:
            assert await client.search(QUERY) == []

    async def test_non_dict_hits_skipped(self, hit_factory):
        body = {"hits": [hit_factory(1, tags="dental"), "junk", 42]}
        handler = RecordingHandler(httpx.Response(200, json=body))
        async with make_client(handler) as client:
            result = await client.search(QUERY)
        assert [c.image_id for c in result] == [1]

    async def test_non_finite_numbers_do_not_drop_response(self):
        """An Infinity literal in one hit leaves the other hits intact."""
        body = (
            b'{"hits": ['
            b'{"id": 1, "tags": "dog", "likes": Infinity, "downloads": 10, "imageWidth": 1280},'
            b'{"id": 2, "tags": "cat", "likes": 20, "downloads": 5, "imageWidth": 1280}'
            b"]}"
        )
        handler = RecordingHandler(httpx.Response(200, content=body))
        async with make_client(handler) as client:
            result = await client.search(QUERY)

        assert [c.image_id for c in result] == [1, 2]
        assert result[0].likes is None
        assert result[1].likes == 20

    async def test_circuit_breaker_stops_calls(self):
        handler = RecordingHandler(httpx.Response(503))
        breaker = CircuitBreaker(failure_threshold=1, recovery_timeout=60.0)
        async with make_client(handler, circuit_breaker=breaker) as client:
            assert await client.search(QUERY) == []
            assert await client.search(QUERY) == []
        assert len(handler.requests) == 1
        assert breaker.state == "open"


class TestConnectionPool:
    """The pooled client is opened lazily and reopened after close()."""

    async def test_search_after_close_reopens_pool(self, pixabay_response):
        handler = RecordingHandler(httpx.Response(200, json=pixabay_response))
        client = make_client(handler)

        assert len(await client.search(QUERY)) == 3
        await client.close()
        await client.close()
        assert len(await client.search(QUERY)) == 3
        await client.close()

        assert len(handler.requests) == 2
        assert client._circuit_breaker.state == "closed"

    async def test_close_without_requests(self):
        client = make_client(RecordingHandler())
        await client.close()
        assert client._client is None


class TestCandidateMapping:
    """Hit dict to CandidateImage conversion."""

    def test_unusable_numbers(self, hit_factory):
        hit = hit_factory(7, tags="dog", likes=None, downloads=-5)
        hit["likes"] = "12"
        hit["imageWidth"] = True
        candidate = PixabayClient._map_to_candidate(hit)

        assert candidate.likes == 12
        assert candidate.downloads == 0
        assert candidate.image_width == 0

    def test_non_finite_numbers(self, hit_factory):
        hit = hit_factory(9, likes=None)
        hit["likes"] = float("inf")
        hit["downloads"] = float("nan")
        hit["imageWidth"] = float("-inf")
        candidate = PixabayClient._map_to_candidate(hit)

        assert candidate.likes is None
        assert candidate.downloads == 0
        assert candidate.image_width == 0

    def test_missing_likes_is_none(self, hit_factory):
        candidate = PixabayClient._map_to_candidate(hit_factory(8, likes=None))
        assert candidate.likes is None


class TestCredentials:
    """API key handling."""

    async def test_key_redacted_from_logs(self, caplog, pixabay_response):
        handler = RecordingHandler(httpx.Response(200, json=pixabay_response))
        client = PixabayClient(api_key="super-secret", transport=httpx.MockTransport(handler))
        with caplog.at_level(logging.DEBUG):
            await client.search(QUERY)
        await client.close()

        own_logs = " ".join(
            record.getMessage() for record in caplog.records if record.name.startswith("pixabay_search")
        )
        assert "super-secret" not in own_logs
        assert "***" in own_logs
        assert handler.requests[0].url.params["key"] == "super-secret"

    def test_missing_key_warns(self, caplog):
        with caplog.at_level(logging.WARNING):
            PixabayClient(api_key="")
        assert "API key is not set" in caplog.text
