"""
Pixabay Image Search Client

Fetches candidate stock photos from the Pixabay REST API.

API Documentation: https://pixabay.com/api/docs/

Limitations:
- One category per request (closed category set)
- per_page accepts 3-200
- The API key travels as a query parameter; it is redacted from logs
- A request answers with ``{"total": ..., "totalHits": ..., "hits": [...]}``;
  only ``hits`` is consumed here
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

from pixabay_search.domain.entities.image import CandidateImage
from pixabay_search.domain.entities.query import EnrichedQuery
from pixabay_search.shared.async_utils import CircuitBreaker

from .base_client import BaseAPIClient

logger = logging.getLogger(__name__)

PIXABAY_API_URL = "https://pixabay.com/api/"


class PixabayClient(BaseAPIClient):
    """
    Pixabay photo search client.

    Every failure (transport, non-2xx status, malformed body) is logged and
    reported as an empty candidate list.

    Usage:
        client = PixabayClient(api_key="...")
        candidates = await client.search(enriched_query)
    """

    _service_name = "Pixabay"

    DEFAULT_FETCH_WIDTH = 50  # Pool handed to the ranker
    MIN_PER_PAGE = 3
    MAX_PER_PAGE = 200
    IMAGE_TYPE = "photo"
    ORDER = "popular"

    def __init__(
        self,
        api_key: str,
        base_url: str = PIXABAY_API_URL,
        timeout: float = 20.0,
        fetch_width: int = DEFAULT_FETCH_WIDTH,
        safesearch: bool = True,
        min_interval: float = 0.0,
        circuit_breaker: CircuitBreaker | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """
        Initialize Pixabay client.

        Args:
            api_key: Pixabay API key
            base_url: API endpoint
            timeout: Request timeout in seconds
            fetch_width: Default per_page (candidate pool size)
            safesearch: Only return images suitable for all ages
            min_interval: Minimum seconds between requests
            circuit_breaker: Optional shared circuit breaker
            transport: Optional httpx transport (tests)
        """
        super().__init__(
            timeout=timeout,
            min_interval=min_interval,
            headers={"Accept": "application/json", "User-Agent": "pixabay-search/0.1.0"},
            circuit_breaker=circuit_breaker,
            transport=transport,
        )
        if not api_key:
            logger.warning("Pixabay API key is not set; requests will be rejected by the provider")
        self._api_key = api_key or ""
        self._api_url = base_url
        self._fetch_width = self._clamp_per_page(fetch_width)
        self._safesearch = safesearch

    @property
    def fetch_width(self) -> int:
        return self._fetch_width

    def build_params(self, query: EnrichedQuery, per_page: int | None = None) -> dict[str, str]:
        """
        Provider query parameters for ``query``.

        ``category`` and ``colors`` are omitted when the query has none.
        """
        params: dict[str, str] = {
            "key": self._api_key,
            "q": query.search_string,
            "image_type": self.IMAGE_TYPE,
            "lang": query.language_code,
            "orientation": query.orientation.value,
            "order": self.ORDER,
            "per_page": str(self._clamp_per_page(per_page or self._fetch_width)),
            "safesearch": "true" if self._safesearch else "false",
        }
        if query.category is not None:
            params["category"] = query.category.value
        if query.color_filter:
            params["colors"] = query.color_filter
        return params

    async def search(
        self,
        query: EnrichedQuery,
        per_page: int | None = None,
    ) -> list[CandidateImage]:
        """
        Fetch candidate images for an enriched query.

        Args:
            query: Provider-ready query
            per_page: Fetch width override (clamped to 3-200)

        Returns:
            Candidates in provider order (empty on any failure)
        """
        if query.is_empty:
            return []

        data = await self._make_request(self._api_url, params=self.build_params(query, per_page))
        if data is None:
            return []
        return self._extract_hits(data)

    def _redact_params(self, params: dict[str, str] | None) -> dict[str, str]:
        redacted = dict(params or {})
        if "key" in redacted:
            redacted["key"] = "***"
        return redacted

    @classmethod
    def _clamp_per_page(cls, per_page: int) -> int:
        return max(cls.MIN_PER_PAGE, min(int(per_page), cls.MAX_PER_PAGE))

    @classmethod
    def _extract_hits(cls, data: Any) -> list[CandidateImage]:
        """Map the response body to candidates; malformed bodies yield none."""
        if not isinstance(data, dict):
            logger.warning(f"Pixabay response is not a JSON object: {type(data).__name__}")
            return []

        hits = data.get("hits")
        if hits is None:
            logger.debug("Pixabay response has no 'hits'; treating as zero candidates")
            return []
        if not isinstance(hits, list):
            logger.warning(f"Pixabay 'hits' is not a list: {type(hits).__name__}")
            return []

        candidates: list[CandidateImage] = []
        for hit in hits:
            if not isinstance(hit, dict):
                logger.warning(f"Skipping malformed Pixabay hit: {hit!r}")
                continue
            candidates.append(cls._map_to_candidate(hit))
        return candidates

    @staticmethod
    def _map_to_candidate(hit: dict[str, Any]) -> CandidateImage:
        """
        Map one Pixabay hit to the domain entity.

        This is the Infrastructure mapper: conversion logic stays
        in Infrastructure, not in Domain.
        """
        tags = hit.get("tags", "")
        return CandidateImage(
            tags=tags if isinstance(tags, str) else "",
            likes=_to_int(hit.get("likes")),
            downloads=_to_int(hit.get("downloads")) or 0,
            image_width=_to_int(hit.get("imageWidth")) or 0,
            raw=hit,
        )


def _to_int(value: Any) -> int | None:
    """Non-negative int from a JSON value, or None if absent/unusable."""
    if value is None or isinstance(value, bool):
        return None
    try:
        number = int(value)
    except (TypeError, ValueError, OverflowError):
        return None
    return number if number >= 0 else None
