"""
Domain Entities: search request and enriched provider query.

SearchRequest is the immutable input of one pipeline run; EnrichedQuery is
the only artifact that crosses into the provider boundary.
"""

from __future__ import annotations

from dataclasses import dataclass

from pixabay_search.shared.exceptions import InvalidParameterError

from .image import Orientation, PixabayCategory

DEFAULT_RESULT_LIMIT = 20
DEFAULT_LANGUAGE_LABEL = "en"
MAX_SEARCH_STRING_LENGTH = 100


@dataclass(frozen=True)
class SearchRequest:
    """
    One inbound image search request.

    Attributes:
        raw_query: Free text, comma- and/or space-delimited terms
        language_label: Internal language/region label ("china", "rtl", ...)
        content_category_hint: Optional content-type label ("pet", "dental")
        result_limit: Maximum number of images returned (positive)
    """

    raw_query: str
    language_label: str = DEFAULT_LANGUAGE_LABEL
    content_category_hint: str | None = None
    result_limit: int = DEFAULT_RESULT_LIMIT

    def __post_init__(self) -> None:
        if isinstance(self.result_limit, bool) or not isinstance(self.result_limit, int):
            raise InvalidParameterError("result_limit", self.result_limit, "a positive integer")
        if self.result_limit < 1:
            raise InvalidParameterError("result_limit", self.result_limit, "a positive integer")
        if self.raw_query is None:
            object.__setattr__(self, "raw_query", "")
        if not self.language_label:
            object.__setattr__(self, "language_label", DEFAULT_LANGUAGE_LABEL)


@dataclass(frozen=True)
class Token:
    """A normalized query term: original casing plus a lowercase comparison form."""

    text: str

    @property
    def lower(self) -> str:
        return self.text.lower()

    def __len__(self) -> int:
        return len(self.text)


@dataclass(frozen=True)
class CategoryMatch:
    """Best category found by the classifier (empty when nothing matched)."""

    category: PixabayCategory | None = None
    priority: int = 0

    @classmethod
    def none(cls) -> CategoryMatch:
        return cls()

    def __bool__(self) -> bool:
        return self.category is not None


@dataclass(frozen=True)
class EnrichedQuery:
    """
    Provider-ready query produced by the enrichment pipeline.

    ``search_string`` is at most MAX_SEARCH_STRING_LENGTH characters; the
    length capper is always the last enrichment step.
    """

    search_string: str
    category: PixabayCategory | None = None
    orientation: Orientation = Orientation.HORIZONTAL
    color_filter: str | None = None
    language_code: str = "en"

    @property
    def is_empty(self) -> bool:
        return not self.search_string.strip()
