"""
Domain Layer - Core Business Objects

Contains:
- entities: search request, enriched query, candidate images
"""

from .entities import (
    CandidateImage,
    CategoryMatch,
    EnrichedQuery,
    Orientation,
    PixabayCategory,
    ScoredImage,
    SearchRequest,
    Token,
)

__all__ = [
    "CandidateImage",
    "CategoryMatch",
    "EnrichedQuery",
    "Orientation",
    "PixabayCategory",
    "ScoredImage",
    "SearchRequest",
    "Token",
]
