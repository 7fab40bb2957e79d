"""
QueryEnricher - free-text request to provider-ready query

Runs the enrichment stages in order:
    Normalizer → Classifier → Builder → Language/Region Resolver → Length Capper

Architecture Decision:
    QueryEnricher is stateless and uses fixed lookup tables only.
    It does NOT call any external APIs - pure local processing.
    The provider call happens in ImageSearchService.

Example:
    >>> enricher = QueryEnricher()
    >>> query = enricher.enrich(SearchRequest("dental clinic magazine"))
    >>> query.category
    <PixabayCategory.HEALTH: 'health'>
    >>> query.search_string
    'dental clinic magazine healthcare medical'
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from pixabay_search.domain.entities.image import Orientation
from pixabay_search.domain.entities.query import (
    DEFAULT_LANGUAGE_LABEL,
    CategoryMatch,
    EnrichedQuery,
    SearchRequest,
    Token,
)

from .classifier import CategoryClassifier
from .locale import LanguageResolver, cap_length
from .normalizer import QueryNormalizer, extract_color
from .query_builder import QueryBuilder

logger = logging.getLogger(__name__)


@dataclass
class EnrichmentReport:
    """
    Intermediate results of one enrichment run.

    Useful for explaining to a caller why a query was rewritten the way it
    was; ``query`` is the final artifact.
    """

    tokens: list[Token]
    category_match: CategoryMatch
    built_string: str
    query: EnrichedQuery
    dropped_terms: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "tokens": [token.text for token in self.tokens],
            "dropped_terms": self.dropped_terms,
            "category": (
                self.category_match.category.value if self.category_match else None
            ),
            "category_priority": self.category_match.priority,
            "search_string": self.query.search_string,
            "orientation": self.query.orientation.value,
            "color_filter": self.query.color_filter,
            "language_code": self.query.language_code,
        }


class QueryEnricher:
    """
    Stateless query enrichment pipeline.

    Usage:
        enricher = QueryEnricher()
        query = enricher.enrich(SearchRequest("pet grooming", language_label="china"))
        # query.search_string == "pet grooming animal chinese"
        # query.language_code == "zh"
    """

    def __init__(
        self,
        normalizer: QueryNormalizer | None = None,
        classifier: CategoryClassifier | None = None,
        builder: QueryBuilder | None = None,
        resolver: LanguageResolver | None = None,
        orientation: Orientation = Orientation.HORIZONTAL,
    ) -> None:
        self._normalizer = normalizer or QueryNormalizer()
        self._classifier = classifier or CategoryClassifier()
        self._builder = builder or QueryBuilder()
        self._resolver = resolver or LanguageResolver()
        self._orientation = orientation

    @property
    def normalizer(self) -> QueryNormalizer:
        return self._normalizer

    @property
    def classifier(self) -> CategoryClassifier:
        return self._classifier

    def enrich(self, request: SearchRequest) -> EnrichedQuery:
        """Produce the EnrichedQuery for ``request``."""
        return self.analyze(request).query

    def analyze(self, request: SearchRequest) -> EnrichmentReport:
        """Run every stage and keep the intermediate results."""
        tokens = self._normalizer.normalize(request.raw_query)
        match = self._classifier.classify(tokens, hint=request.content_category_hint)
        built = self._builder.build(tokens, match)
        language_code, regional = self._resolver.resolve(built, request.language_label)
        search_string = cap_length(regional)

        query = EnrichedQuery(
            search_string=search_string,
            category=match.category,
            orientation=self._orientation,
            color_filter=extract_color(tokens),
            language_code=language_code,
        )
        logger.debug(
            f"Enriched {request.raw_query!r} -> {query.search_string!r} "
            f"(category={match.category.value if match else None}, lang={language_code})"
        )

        kept = {token.lower for token in tokens}
        dropped = [
            term
            for term in (request.raw_query or "").replace(",", " ").split()
            if term.lower() not in kept
        ]
        return EnrichmentReport(
            tokens=tokens,
            category_match=match,
            built_string=built,
            query=query,
            dropped_terms=dropped,
        )


# Convenience function
def enrich_query(
    raw_query: str,
    language_label: str = DEFAULT_LANGUAGE_LABEL,
    content_category_hint: str | None = None,
) -> EnrichedQuery:
    """
    Enrich a raw query with the default tables (convenience function).

    Args:
        raw_query: Free text query
        language_label: Internal language/region label
        content_category_hint: Optional content-type label

    Returns:
        EnrichedQuery ready for the provider
    """
    request = SearchRequest(
        raw_query=raw_query,
        language_label=language_label,
        content_category_hint=content_category_hint,
    )
    return QueryEnricher().enrich(request)
