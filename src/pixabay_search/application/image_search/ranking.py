"""
Quality Filtering and Relevance Ranking for provider image hits.

Score per candidate:
    Σ per query term:  whole-word tag match   +25
                       else substring match   +10
                       else 4-char prefix     +3   (terms of length ≥ 4)
    + min(likes / 100, 8) + min(downloads / 2000, 8)
    + 4 if image width ≥ 1920

Popularity contributions saturate so they cannot outweigh tag relevance.
Sorting is stable: equal scores keep the provider's order.

Architecture:
    These are stateless functions called by ImageSearchService.
    They read CandidateImage fields only; provider records are never mutated.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from pixabay_search.domain.entities.image import CandidateImage, ScoredImage
from pixabay_search.domain.entities.query import DEFAULT_RESULT_LIMIT

DEFAULT_MIN_LIKES = 10

_MIN_TERM_LENGTH = 2
_PREFIX_LENGTH = 4


@dataclass(frozen=True)
class ScoringWeights:
    """Weights of the relevance function."""

    whole_word: float = 25.0
    substring: float = 10.0
    prefix: float = 3.0
    likes_divisor: float = 100.0
    likes_cap: float = 8.0
    downloads_divisor: float = 2000.0
    downloads_cap: float = 8.0
    hd_width: int = 1920
    hd_bonus: float = 4.0


DEFAULT_WEIGHTS = ScoringWeights()

# Earlier pipeline revisions: coarser tag weights, no prefix credit
LEGACY_WEIGHTS = ScoringWeights(whole_word=20.0, substring=5.0, prefix=0.0)


# =============================================================================
# Quality Filter
# =============================================================================


def filter_by_quality(
    candidates: Iterable[CandidateImage],
    min_likes: int = DEFAULT_MIN_LIKES,
) -> list[CandidateImage]:
    """
    Keep candidates with at least ``min_likes`` likes.

    Candidates whose record has no ``likes`` value fail the threshold.
    """
    return [
        image
        for image in candidates
        if image.likes is not None and image.likes >= min_likes
    ]


# =============================================================================
# Relevance Scoring
# =============================================================================


def query_terms(search_string: str) -> list[str]:
    """Whitespace-split terms, skipping empty and 1-char terms."""
    return [term for term in search_string.split() if len(term) >= _MIN_TERM_LENGTH]


def term_match_score(
    term: str,
    tags: str,
    weights: ScoringWeights = DEFAULT_WEIGHTS,
) -> float:
    """Tag-match credit for one query term (case-insensitive)."""
    if not term or not tags:
        return 0.0

    term_lower = term.lower()
    tags_lower = tags.lower()

    if re.search(rf"(?<!\w){re.escape(term_lower)}(?!\w)", tags_lower):
        return weights.whole_word
    if term_lower in tags_lower:
        return weights.substring
    if len(term_lower) >= _PREFIX_LENGTH and term_lower[:_PREFIX_LENGTH] in tags_lower:
        return weights.prefix
    return 0.0


def popularity_score(
    image: CandidateImage,
    weights: ScoringWeights = DEFAULT_WEIGHTS,
) -> float:
    """Saturating popularity contribution from likes and downloads."""
    likes = image.likes or 0
    return (
        min(likes / weights.likes_divisor, weights.likes_cap)
        + min(image.downloads / weights.downloads_divisor, weights.downloads_cap)
    )


def relevance_score(
    image: CandidateImage,
    terms: Sequence[str],
    weights: ScoringWeights = DEFAULT_WEIGHTS,
) -> float:
    """Total relevance score of one candidate for the given query terms."""
    score = sum(term_match_score(term, image.tags, weights) for term in terms)
    score += popularity_score(image, weights)
    if image.image_width >= weights.hd_width:
        score += weights.hd_bonus
    return score


# =============================================================================
# Ranking
# =============================================================================


def score_images(
    candidates: Iterable[CandidateImage],
    search_string: str,
    weights: ScoringWeights = DEFAULT_WEIGHTS,
) -> list[ScoredImage]:
    """Attach a relevance score to each candidate (provider order kept)."""
    terms = query_terms(search_string)
    return [
        ScoredImage(image=image, relevance_score=relevance_score(image, terms, weights))
        for image in candidates
    ]


def rank_images(
    candidates: Iterable[CandidateImage],
    search_string: str,
    limit: int = DEFAULT_RESULT_LIMIT,
    weights: ScoringWeights = DEFAULT_WEIGHTS,
) -> list[ScoredImage]:
    """
    Score, sort descending (stable) and truncate to ``limit``.

    Args:
        candidates: Provider hits in provider order
        search_string: The enriched search string sent to the provider
        limit: Maximum number of results
        weights: Scoring weights

    Returns:
        At most ``limit`` scored images, best first
    """
    scored = score_images(candidates, search_string, weights)
    ranked = sorted(scored, key=lambda item: item.relevance_score, reverse=True)
    return ranked[: max(limit, 0)]
