"""
Pixabay Search - Stock Photo Query Enrichment and Ranking

Turns a short free-text description (e.g. a site template's name) into a
good Pixabay query, fetches candidates and re-ranks them by relevance.

Usage:
    from pixabay_search import ImageSearchService, PixabayClient, SearchRequest

    service = ImageSearchService(client=PixabayClient(api_key="..."))
    images = await service.search_images(SearchRequest("dental clinic", result_limit=10))

    for image in images:
        print(image["id"], image["tags"])

Features:
    - Query cleanup (plan words such as "free"/"pro"/"child" removed)
    - Category classification against Pixabay's closed category set
    - Tiered term selection with context boosting and region keywords
    - Quality filtering and tag/popularity relevance ranking
    - HTTP (FastAPI) and MCP surfaces
"""

from .application.image_search import (
    EnrichmentReport,
    ImageSearchResult,
    ImageSearchService,
    QueryEnricher,
    enrich_query,
    rank_images,
)
from .domain import CandidateImage, EnrichedQuery, PixabayCategory, SearchRequest
from .infrastructure.sources import PixabayClient

__version__ = "0.1.0"

__all__ = [
    # High-level API
    "ImageSearchService",
    "ImageSearchResult",
    "PixabayClient",
    # Enrichment and ranking
    "QueryEnricher",
    "EnrichmentReport",
    "enrich_query",
    "rank_images",
    # Domain
    "SearchRequest",
    "EnrichedQuery",
    "CandidateImage",
    "PixabayCategory",
]
