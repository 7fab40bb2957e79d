"""
Query Builder - tiered keyword selection and contextual boosting.

Assembly order:
    1. every Tier 1 token (specific content nouns)
    2. up to MAX_TIER3_TOKENS Tier 3 tokens (geographic)
    3. Tier 2 tokens (generic descriptors) until MAX_QUERY_TOKENS
    4. fallback: if fewer than MIN_SELECTED_TOKENS were kept, append other
       non-generic tokens longer than 2 chars until FALLBACK_TARGET_TOKENS

The result is de-duplicated (first occurrence wins) and joined with spaces.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence

from pixabay_search.domain.entities.image import PixabayCategory
from pixabay_search.domain.entities.query import CategoryMatch, Token

from .vocabulary import (
    BOOST_MAX_LENGTH,
    CONTEXT_BOOSTS,
    FALLBACK_MIN_TOKEN_LENGTH,
    FALLBACK_TARGET_TOKENS,
    MAX_QUERY_TOKENS,
    MAX_TIER3_TOKENS,
    MIN_SELECTED_TOKENS,
    TIER1_CONTENT_NOUNS,
    TIER2_GENERIC,
    TIER3_GEOGRAPHIC,
)

logger = logging.getLogger(__name__)


class QueryBuilder:
    """
    Turns normalized tokens plus a category match into the search string.

    Usage:
        builder = QueryBuilder()
        text = builder.build(tokens, match)
    """

    def __init__(
        self,
        boosts: Mapping[PixabayCategory, tuple[frozenset[str], str]] = CONTEXT_BOOSTS,
        max_tokens: int = MAX_QUERY_TOKENS,
        boost_max_length: int = BOOST_MAX_LENGTH,
    ) -> None:
        self._boosts = boosts
        self._max_tokens = max_tokens
        self._boost_max_length = boost_max_length

    def build(self, tokens: Sequence[Token], match: CategoryMatch) -> str:
        """Select tokens, join them, then apply category context boosting."""
        selected = self.select_tokens(tokens)
        search_string = " ".join(token.text for token in selected)
        return self.boost(search_string, match)

    def select_tokens(self, tokens: Sequence[Token]) -> list[Token]:
        """Tiered selection with fallback and case-insensitive de-duplication."""
        tier1 = [i for i, t in enumerate(tokens) if t.lower in TIER1_CONTENT_NOUNS]
        tier3 = [i for i, t in enumerate(tokens) if t.lower in TIER3_GEOGRAPHIC]
        tier2 = [i for i, t in enumerate(tokens) if t.lower in TIER2_GENERIC]

        picked = tier1 + tier3[:MAX_TIER3_TOKENS]
        free_slots = max(0, self._max_tokens - len(picked))
        picked += tier2[:free_slots]

        if len(picked) < MIN_SELECTED_TOKENS:
            for i, token in enumerate(tokens):
                if len(picked) >= FALLBACK_TARGET_TOKENS:
                    break
                if i in picked or token.lower in TIER2_GENERIC:
                    continue
                if len(token) < FALLBACK_MIN_TOKEN_LENGTH:
                    continue
                picked.append(i)

        return _dedupe([tokens[i] for i in picked])

    def boost(self, search_string: str, match: CategoryMatch) -> str:
        """
        Append the category's context phrase when a trigger word is present.

        Each phrase word is added only if not already a word of the string,
        and only while the string stays within the boost length limit.
        """
        if not match or not search_string:
            return search_string

        entry = self._boosts.get(match.category)
        if entry is None:
            return search_string
        triggers, phrase = entry

        lowered = search_string.lower()
        if not any(trigger in lowered for trigger in triggers):
            return search_string
        if phrase.lower() in lowered:
            return search_string

        present = set(lowered.split())
        boosted = search_string
        for word in phrase.split():
            if word.lower() in present:
                continue
            candidate = f"{boosted} {word}"
            if len(candidate) > self._boost_max_length:
                continue
            boosted = candidate
            present.add(word.lower())

        if boosted != search_string:
            logger.debug(f"Context boost ({match.category.value}): {boosted!r}")
        return boosted


def _dedupe(tokens: Sequence[Token]) -> list[Token]:
    seen: set[str] = set()
    unique: list[Token] = []
    for token in tokens:
        if token.lower in seen:
            continue
        seen.add(token.lower)
        unique.append(token)
    return unique
