"""
Category Classifier - collapse a token set to one provider category.

The provider accepts a single category per query, so multi-topic queries
collapse to the most specific signal: the highest-priority table match,
first-seen on ties.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence

from pixabay_search.domain.entities.image import PixabayCategory
from pixabay_search.domain.entities.query import CategoryMatch, Token

from .vocabulary import CATEGORY_KEYWORDS

logger = logging.getLogger(__name__)


class CategoryClassifier:
    """
    Priority-weighted keyword classifier.

    Usage:
        classifier = CategoryClassifier()
        match = classifier.classify([Token("medical"), Token("news")])
        # CategoryMatch(category=PixabayCategory.HEALTH, priority=5)
    """

    def __init__(
        self,
        table: Mapping[str, tuple[PixabayCategory, int]] = CATEGORY_KEYWORDS,
    ) -> None:
        self._table = table

    def lookup(self, word: str) -> CategoryMatch:
        """Table entry for a single word (empty match if unmapped)."""
        entry = self._table.get(word.lower())
        if entry is None:
            return CategoryMatch.none()
        category, priority = entry
        return CategoryMatch(category=category, priority=priority)

    def classify(
        self,
        tokens: Sequence[Token],
        hint: str | None = None,
    ) -> CategoryMatch:
        """
        Pick the single best category for the tokens.

        Args:
            tokens: Normalized query tokens (in query order)
            hint: Optional content-type label; evaluated before the tokens,
                so it wins priority ties

        Returns:
            Best CategoryMatch, or the empty match when nothing maps
        """
        words = [token.lower for token in tokens]
        if hint:
            words.insert(0, hint.strip().lower())

        best = CategoryMatch.none()
        for word in words:
            candidate = self.lookup(word)
            if candidate and candidate.priority > best.priority:
                best = candidate

        if best:
            logger.debug(f"Classified query as {best.category.value} (priority {best.priority})")
        return best

    def matched_categories(self, tokens: Sequence[Token]) -> list[PixabayCategory]:
        """Every distinct category hit by any token, in first-seen order."""
        seen: list[PixabayCategory] = []
        for token in tokens:
            match = self.lookup(token.lower)
            if match and match.category not in seen:
                seen.append(match.category)
        return seen
