"""
Domain Entities

Core business objects for stock image search.
"""

from __future__ import annotations

from .image import CandidateImage, Orientation, PixabayCategory, ScoredImage
from .query import (
    DEFAULT_LANGUAGE_LABEL,
    DEFAULT_RESULT_LIMIT,
    MAX_SEARCH_STRING_LENGTH,
    CategoryMatch,
    EnrichedQuery,
    SearchRequest,
    Token,
)

__all__ = [
    # Image entities
    "CandidateImage",
    "ScoredImage",
    "PixabayCategory",
    "Orientation",
    # Query entities
    "SearchRequest",
    "Token",
    "CategoryMatch",
    "EnrichedQuery",
    "DEFAULT_RESULT_LIMIT",
    "DEFAULT_LANGUAGE_LABEL",
    "MAX_SEARCH_STRING_LENGTH",
]
