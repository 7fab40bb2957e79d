"""
Application Service: Image Search

Coordinates query enrichment, the provider call, quality filtering and
relevance ranking.

Usage:
    >>> service = ImageSearchService(client=PixabayClient(api_key="..."))
    >>> result = await service.search(SearchRequest("dental clinic", result_limit=10))
    >>> result.to_list()

Per-category fan-out (one provider call per matched category):
    >>> by_category = await service.search_by_category(SearchRequest("pet food"))
    >>> by_category.keys()
    dict_keys(['animals', 'food'])
"""

from __future__ import annotations

import dataclasses
import logging
from dataclasses import dataclass, field
from typing import Any, Protocol

from pixabay_search.domain.entities.image import CandidateImage, PixabayCategory, ScoredImage
from pixabay_search.domain.entities.query import EnrichedQuery, SearchRequest
from pixabay_search.shared.async_utils import gather_with_errors
from pixabay_search.shared.exceptions import is_retryable_error

from .enricher import QueryEnricher
from .ranking import DEFAULT_MIN_LIKES, DEFAULT_WEIGHTS, ScoringWeights, filter_by_quality, rank_images

logger = logging.getLogger(__name__)


class ImageProvider(Protocol):
    """What the service needs from a provider client."""

    async def search(
        self, query: EnrichedQuery, per_page: int | None = None
    ) -> list[CandidateImage]: ...


@dataclass
class ImageSearchResult:
    """Container for one ranked image search."""

    query: EnrichedQuery | None
    ranked: list[ScoredImage] = field(default_factory=list)
    candidate_count: int = 0
    filtered_count: int = 0
    errors: list[str] = field(default_factory=list)

    @property
    def images(self) -> list[CandidateImage]:
        return [item.image for item in self.ranked]

    @property
    def provider_called(self) -> bool:
        return self.query is not None and not self.query.is_empty

    def to_list(self) -> list[dict[str, Any]]:
        """Provider records in ranked order (the public result contract)."""
        return [image.to_dict() for image in self.images]


class ImageSearchService:
    """
    Image search application service.

    Architecture:
        Presentation → Application (here) → Infrastructure (PixabayClient)
        Domain entities (EnrichedQuery, CandidateImage) flow between layers.

    Provider failures never propagate: they are logged and yield an empty
    (well-formed) result.
    """

    DEFAULT_FAN_OUT_PER_PAGE = 3

    def __init__(
        self,
        client: ImageProvider,
        enricher: QueryEnricher | None = None,
        min_likes: int = DEFAULT_MIN_LIKES,
        fetch_width: int | None = None,
        fan_out_per_page: int = DEFAULT_FAN_OUT_PER_PAGE,
        weights: ScoringWeights = DEFAULT_WEIGHTS,
    ) -> None:
        self._client = client
        self._enricher = enricher or QueryEnricher()
        self._min_likes = min_likes
        self._fetch_width = fetch_width
        self._fan_out_per_page = fan_out_per_page
        self._weights = weights

    @property
    def enricher(self) -> QueryEnricher:
        return self._enricher

    async def search(self, request: SearchRequest) -> ImageSearchResult:
        """
        Single-call search: enrich, fetch once, filter, rank.

        Args:
            request: Inbound search request

        Returns:
            ImageSearchResult (empty when the query normalizes to nothing
            or the provider call fails)
        """
        if not request.raw_query or not request.raw_query.strip():
            return ImageSearchResult(query=None)

        query = self._enricher.enrich(request)
        if query.is_empty:
            logger.info(f"Query {request.raw_query!r} normalized to nothing; skipping provider call")
            return ImageSearchResult(query=query)

        errors: list[str] = []
        try:
            candidates = await self._client.search(query, per_page=self._fetch_width)
        except Exception as e:
            logger.error(
                f"Image search failed for {query.search_string!r}: {e} "
                f"(transient={is_retryable_error(e)})"
            )
            errors.append(f"provider: {e}")
            candidates = []

        return self._rank(query, candidates, request.result_limit, errors)

    async def search_images(self, request: SearchRequest) -> list[dict[str, Any]]:
        """Ranked provider records as a JSON-serializable list."""
        result = await self.search(request)
        return result.to_list()

    async def search_by_category(
        self,
        request: SearchRequest,
    ) -> dict[str, list[dict[str, Any]]]:
        """
        Fan-out search: one provider call per matched category.

        Categories are those hit by any query token (plus the content hint);
        when none match, every provider category is queried. Calls run
        concurrently and fail independently: a failed category maps to [].

        Returns:
            {category value: ranked provider records}
        """
        if not request.raw_query or not request.raw_query.strip():
            return {}

        report = self._enricher.analyze(request)
        query = report.query
        if query.is_empty:
            return {}

        categories = self._fan_out_categories(report.tokens, request.content_category_hint)
        logger.info(
            f"Fan-out search {query.search_string!r} across {len(categories)} categories"
        )

        outcomes = await gather_with_errors(
            *[
                self._client.search(
                    dataclasses.replace(query, category=category),
                    per_page=self._fan_out_per_page,
                )
                for category in categories
            ],
            return_exceptions=True,
        )

        grouped: dict[str, list[dict[str, Any]]] = {}
        for category, outcome in zip(categories, outcomes, strict=True):
            if isinstance(outcome, Exception):
                logger.error(f"Image search failed for category {category.value}: {outcome}")
                grouped[category.value] = []
                continue
            ranked = self._rank(
                dataclasses.replace(query, category=category),
                outcome,
                request.result_limit,
                [],
            )
            grouped[category.value] = ranked.to_list()
        return grouped

    def _fan_out_categories(self, tokens, hint: str | None) -> list[PixabayCategory]:
        classifier = self._enricher.classifier
        categories = classifier.matched_categories(tokens)
        if hint:
            hinted = classifier.lookup(hint)
            if hinted and hinted.category not in categories:
                categories.insert(0, hinted.category)
        return categories or list(PixabayCategory)

    def _rank(
        self,
        query: EnrichedQuery,
        candidates: list[CandidateImage],
        limit: int,
        errors: list[str],
    ) -> ImageSearchResult:
        filtered = filter_by_quality(candidates, self._min_likes)
        ranked = rank_images(filtered, query.search_string, limit=limit, weights=self._weights)
        logger.debug(
            f"{len(candidates)} candidates, {len(filtered)} passed quality filter, "
            f"returning {len(ranked)}"
        )
        return ImageSearchResult(
            query=query,
            ranked=ranked,
            candidate_count=len(candidates),
            filtered_count=len(filtered),
            errors=errors,
        )
