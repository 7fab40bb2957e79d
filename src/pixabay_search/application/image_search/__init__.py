"""
Application Layer: Image Search

Public API for the image search module.
"""

from .classifier import CategoryClassifier
from .enricher import EnrichmentReport, QueryEnricher, enrich_query
from .locale import LanguageResolver, cap_length
from .normalizer import QueryNormalizer, extract_color
from .query_builder import QueryBuilder
from .ranking import (
    DEFAULT_MIN_LIKES,
    DEFAULT_WEIGHTS,
    LEGACY_WEIGHTS,
    ScoringWeights,
    filter_by_quality,
    rank_images,
    relevance_score,
)
from .service import ImageProvider, ImageSearchResult, ImageSearchService

__all__ = [
    # Service
    "ImageSearchService",
    "ImageSearchResult",
    "ImageProvider",
    # Enrichment
    "QueryEnricher",
    "EnrichmentReport",
    "enrich_query",
    "QueryNormalizer",
    "extract_color",
    "CategoryClassifier",
    "QueryBuilder",
    "LanguageResolver",
    "cap_length",
    # Ranking
    "ScoringWeights",
    "DEFAULT_WEIGHTS",
    "LEGACY_WEIGHTS",
    "DEFAULT_MIN_LIKES",
    "filter_by_quality",
    "rank_images",
    "relevance_score",
]
