"""
Language/Region Resolver and Length Capper.
"""

from __future__ import annotations

from collections.abc import Mapping

from pixabay_search.domain.entities.query import MAX_SEARCH_STRING_LENGTH

from .vocabulary import (
    DEFAULT_LANGUAGE_CODE,
    LANGUAGE_CODES,
    REGION_KEYWORDS,
    REGION_MAX_LENGTH,
)


class LanguageResolver:
    """
    Maps an internal language/region label to a provider language code,
    optionally appending a regional keyword to the search string.

    Usage:
        resolver = LanguageResolver()
        code, text = resolver.resolve("street food", "china")
        # ("zh", "street food chinese")
    """

    def __init__(
        self,
        language_codes: Mapping[str, str] = LANGUAGE_CODES,
        region_keywords: Mapping[str, str] = REGION_KEYWORDS,
        max_length: int = REGION_MAX_LENGTH,
    ) -> None:
        self._language_codes = language_codes
        self._region_keywords = region_keywords
        self._max_length = max_length

    def language_code(self, label: str | None) -> str:
        """Provider language code for ``label``; unknown labels map to English."""
        if not label:
            return DEFAULT_LANGUAGE_CODE
        return self._language_codes.get(label.strip().lower(), DEFAULT_LANGUAGE_CODE)

    def apply_region(self, search_string: str, label: str | None) -> str:
        """Append the label's regional keyword if absent and it fits."""
        if not label or not search_string:
            return search_string
        keyword = self._region_keywords.get(label.strip().lower())
        if keyword is None or keyword.lower() in search_string.lower():
            return search_string
        candidate = f"{search_string} {keyword}"
        if len(candidate) > self._max_length:
            return search_string
        return candidate

    def resolve(self, search_string: str, label: str | None) -> tuple[str, str]:
        """Return ``(language_code, search_string)``."""
        return self.language_code(label), self.apply_region(search_string, label)


def cap_length(search_string: str, limit: int = MAX_SEARCH_STRING_LENGTH) -> str:
    """Hard character cut; may split the final word."""
    return search_string[:limit]
