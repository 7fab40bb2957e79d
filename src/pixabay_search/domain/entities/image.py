"""
Domain Entity: CandidateImage

Read-only view over one image record returned by the stock-photo provider.
Pure domain entity with no provider-specific factory methods.
Mapping from the raw provider hit is handled by the Infrastructure layer.
"""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class PixabayCategory(str, Enum):
    """The provider's closed set of content categories (one per query)."""

    BACKGROUNDS = "backgrounds"
    FASHION = "fashion"
    NATURE = "nature"
    SCIENCE = "science"
    EDUCATION = "education"
    FEELINGS = "feelings"
    HEALTH = "health"
    PEOPLE = "people"
    RELIGION = "religion"
    PLACES = "places"
    ANIMALS = "animals"
    INDUSTRY = "industry"
    COMPUTER = "computer"
    FOOD = "food"
    SPORTS = "sports"
    TRANSPORTATION = "transportation"
    TRAVEL = "travel"
    BUILDINGS = "buildings"
    BUSINESS = "business"
    MUSIC = "music"


class Orientation(str, Enum):
    """Image orientation filter accepted by the provider."""

    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"
    ALL = "all"


@dataclass(frozen=True)
class CandidateImage:
    """
    One provider search hit, as seen by the ranking stage.

    Only the fields the ranker reads are lifted out; ``raw`` keeps the
    provider record untouched so it can be handed back to the caller as-is.
    ``likes`` is None when the provider omitted it (fails quality filter).
    """

    tags: str = ""
    likes: int | None = None
    downloads: int = 0
    image_width: int = 0
    raw: dict[str, Any] = field(default_factory=dict, compare=False, repr=False)

    @property
    def image_id(self) -> Any:
        """Provider identifier, if the record carries one."""
        return self.raw.get("id")

    def to_dict(self) -> dict[str, Any]:
        """Serialize back to the provider's JSON shape (a deep copy of ``raw``)."""
        return copy.deepcopy(self.raw)


@dataclass(frozen=True)
class ScoredImage:
    """A candidate paired with its transient relevance score."""

    image: CandidateImage
    relevance_score: float
