"""
Pytest configuration and shared fixtures.
"""

from __future__ import annotations

from typing import Any
from unittest.mock import AsyncMock

import pytest

from pixabay_search.domain.entities.image import CandidateImage

# ============================================================
# Provider Payload Fixtures
# ============================================================


def make_hit(
    image_id: int,
    tags: str = "",
    likes: int | None = 50,
    downloads: int = 0,
    image_width: int = 1280,
    **extra: Any,
) -> dict[str, Any]:
    """Build one Pixabay ``hits`` record (only the fields the code reads, plus URLs)."""
    hit: dict[str, Any] = {
        "id": image_id,
        "tags": tags,
        "downloads": downloads,
        "imageWidth": image_width,
        "webformatURL": f"https://pixabay.com/get/{image_id}_640.jpg",
        "largeImageURL": f"https://pixabay.com/get/{image_id}_1280.jpg",
    }
    if likes is not None:
        hit["likes"] = likes
    hit.update(extra)
    return hit


def make_candidate(image_id: int, **kwargs: Any) -> CandidateImage:
    """Candidate mapped the way PixabayClient maps a hit."""
    hit = make_hit(image_id, **kwargs)
    return CandidateImage(
        tags=hit["tags"],
        likes=hit.get("likes"),
        downloads=hit["downloads"],
        image_width=hit["imageWidth"],
        raw=hit,
    )


@pytest.fixture
def hit_factory():
    return make_hit


@pytest.fixture
def candidate_factory():
    return make_candidate


@pytest.fixture
def pixabay_response():
    """Mock Pixabay API response body."""
    return {
        "total": 3,
        "totalHits": 3,
        "hits": [
            make_hit(101, tags="dentist, dental, teeth", likes=120, downloads=9000),
            make_hit(102, tags="office, desk", likes=5, downloads=100),
            make_hit(103, tags="clinic, healthcare, medical", likes=40, downloads=2000, image_width=1920),
        ],
    }


@pytest.fixture
def candidates():
    """Candidates in provider order: mixed relevance and popularity."""
    return [
        make_candidate(1, tags="city, skyline", likes=300, downloads=20000),
        make_candidate(2, tags="dental, clinic", likes=15, downloads=100),
        make_candidate(3, tags="dentist, tools", likes=10, downloads=0),
        make_candidate(4, tags="dental", likes=9, downloads=50000),
        make_candidate(5, tags="medical, clinic", likes=None, downloads=0),
    ]


# ============================================================
# Provider Client Mocks
# ============================================================


@pytest.fixture
def mock_provider():
    """Provider client returning no candidates unless configured."""
    provider = AsyncMock()
    provider.search = AsyncMock(return_value=[])
    provider.close = AsyncMock()
    return provider
