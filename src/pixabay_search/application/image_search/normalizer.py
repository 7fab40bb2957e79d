"""
Query Normalizer - raw query text to ordered tokens.

Splits on commas and/or whitespace, trims punctuation noise, and drops
excluded vocabulary (substring match, case-insensitive) and 1-char tokens.
Order and duplicates are preserved; de-duplication is the builder's job.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Sequence

from pixabay_search.domain.entities.query import Token

from .vocabulary import EXCLUDED_WORDS, PIXABAY_COLORS, TOKEN_STRIP_CHARS

_SPLIT_PATTERN = re.compile(r"[,\s]+")


class QueryNormalizer:
    """
    Stateless tokenizer for free-text image queries.

    Usage:
        normalizer = QueryNormalizer()
        tokens = normalizer.normalize("free, Dental Clinic, pro tips")
        # [Token("Dental"), Token("Clinic"), Token("tips")]
    """

    def __init__(self, excluded_words: Iterable[str] = EXCLUDED_WORDS) -> None:
        self._excluded = tuple(word.lower() for word in excluded_words)

    def normalize(self, raw_query: str | None) -> list[Token]:
        """
        Split and filter a raw query.

        Args:
            raw_query: Free text, comma- or space-delimited

        Returns:
            Surviving tokens in original order with original casing
        """
        if not raw_query:
            return []

        tokens: list[Token] = []
        for piece in _SPLIT_PATTERN.split(raw_query):
            text = piece.strip().strip(TOKEN_STRIP_CHARS)
            if len(text) <= 1:
                continue
            if self.is_excluded(text):
                continue
            tokens.append(Token(text))
        return tokens

    def is_excluded(self, text: str) -> bool:
        """True if ``text`` contains any excluded word anywhere."""
        lowered = text.lower()
        return any(word in lowered for word in self._excluded)

    @staticmethod
    def lower_view(tokens: Sequence[Token]) -> list[str]:
        """Parallel lowercase view used for table lookups."""
        return [token.lower for token in tokens]


def extract_color(tokens: Sequence[Token]) -> str | None:
    """First token naming a provider color filter value, if any."""
    for token in tokens:
        if token.lower in PIXABAY_COLORS:
            return token.lower
    return None
