"""Tests for ImageSearchService: enrichment, provider call, ranking and fan-out."""

from __future__ import annotations

from unittest.mock import AsyncMock, patch

import pytest

from pixabay_search.application.image_search import ImageSearchService
from pixabay_search.domain.entities.image import PixabayCategory
from pixabay_search.domain.entities.query import SearchRequest


@pytest.fixture
def service(mock_provider):
    return ImageSearchService(client=mock_provider)


class TestSearch:
    """Tests for single-call search."""

    async def test_ranked_records(self, service, mock_provider, candidates):
        mock_provider.search.return_value = candidates

        images = await service.search_images(SearchRequest("dental clinic"))

        assert [image["id"] for image in images] == [2, 1, 3]
        assert images[0] == candidates[1].raw
        mock_provider.search.assert_awaited_once()

    async def test_provider_receives_enriched_query(self, service, mock_provider):
        await service.search(SearchRequest("dental clinic magazine", language_label="china"))

        query = mock_provider.search.await_args.args[0]
        assert query.category == PixabayCategory.HEALTH
        assert query.language_code == "zh"
        assert query.search_string == "dental clinic magazine healthcare medical chinese"
        assert mock_provider.search.await_args.kwargs == {"per_page": None}

    async def test_result_limit(self, service, mock_provider, candidates):
        mock_provider.search.return_value = candidates
        images = await service.search_images(SearchRequest("dental clinic", result_limit=1))
        assert [image["id"] for image in images] == [2]

    async def test_result_counts(self, service, mock_provider, candidates):
        mock_provider.search.return_value = candidates
        result = await service.search(SearchRequest("dental clinic"))

        assert result.provider_called
        assert result.candidate_count == 5
        assert result.filtered_count == 3
        assert len(result.images) == 3

    @pytest.mark.parametrize("raw", ["", "   "])
    async def test_empty_query_makes_no_call(self, service, mock_provider, raw):
        result = await service.search(SearchRequest(raw))

        assert result.query is None
        assert result.to_list() == []
        assert not result.provider_called
        mock_provider.search.assert_not_awaited()

    async def test_fully_excluded_query_makes_no_call(self, service, mock_provider):
        result = await service.search(SearchRequest("free, pro, child"))

        assert result.query is not None
        assert result.query.is_empty
        assert result.to_list() == []
        mock_provider.search.assert_not_awaited()

    async def test_provider_failure_yields_empty(self, service, mock_provider):
        mock_provider.search.side_effect = RuntimeError("connection reset")

        result = await service.search(SearchRequest("dental clinic"))

        assert result.to_list() == []
        assert result.errors == ["provider: connection reset"]

    async def test_custom_quality_threshold(self, mock_provider, candidates):
        mock_provider.search.return_value = candidates
        service = ImageSearchService(client=mock_provider, min_likes=0)
        images = await service.search_images(SearchRequest("dental clinic"))
        # likes=None still fails; likes=9 now passes
        assert sorted(image["id"] for image in images) == [1, 2, 3, 4]

    async def test_fetch_width_passed_to_provider(self, mock_provider):
        service = ImageSearchService(client=mock_provider, fetch_width=80)
        await service.search(SearchRequest("dental"))
        assert mock_provider.search.await_args.kwargs == {"per_page": 80}


class TestSearchByCategory:
    """Tests for per-category fan-out search."""

    async def test_one_call_per_matched_category(self, service, mock_provider, candidate_factory):
        async def fake_search(query, per_page=None):
            return [candidate_factory(10, tags=f"{query.category.value} pet food", likes=20)]

        mock_provider.search.side_effect = fake_search

        grouped = await service.search_by_category(SearchRequest("pet food"))

        assert list(grouped) == ["animals", "food"]
        assert grouped["animals"][0]["tags"] == "animals pet food"
        assert mock_provider.search.await_count == 2
        for call in mock_provider.search.await_args_list:
            assert call.kwargs == {"per_page": 3}

    async def test_failed_category_is_isolated(self, service, mock_provider, candidate_factory):
        async def flaky_search(query, per_page=None):
            if query.category == PixabayCategory.FOOD:
                raise RuntimeError("timeout")
            return [candidate_factory(1, tags="pet", likes=50)]

        mock_provider.search.side_effect = flaky_search

        grouped = await service.search_by_category(SearchRequest("pet food"))

        assert grouped["food"] == []
        assert [image["id"] for image in grouped["animals"]] == [1]

    async def test_no_match_queries_every_category(self, service, mock_provider):
        grouped = await service.search_by_category(SearchRequest("grooming salon"))

        assert set(grouped) == {category.value for category in PixabayCategory}
        assert mock_provider.search.await_count == len(PixabayCategory)

    async def test_hint_category_first(self, service, mock_provider):
        grouped = await service.search_by_category(
            SearchRequest("pet food", content_category_hint="dental")
        )
        assert list(grouped) == ["health", "animals", "food"]

    async def test_empty_query(self, service, mock_provider):
        assert await service.search_by_category(SearchRequest("")) == {}
        assert await service.search_by_category(SearchRequest("free pro")) == {}
        mock_provider.search.assert_not_awaited()

    async def test_fan_out_runs_one_enrichment(self, mock_provider):
        service = ImageSearchService(client=mock_provider)
        with patch.object(service.enricher, "analyze", wraps=service.enricher.analyze) as spy:
            await service.search_by_category(SearchRequest("pet"))
        spy.assert_called_once()


class TestProviderProtocol:
    """Tests for duck-typed providers."""

    async def test_any_async_search_works(self, candidate_factory):
        class StaticProvider:
            async def search(self, query, per_page=None):
                return [candidate_factory(5, tags=query.search_string, likes=11)]

        service = ImageSearchService(client=StaticProvider())
        images = await service.search_images(SearchRequest("dog"))
        assert [image["id"] for image in images] == [5]

    async def test_async_mock_client(self):
        client = AsyncMock()
        client.search.return_value = []
        service = ImageSearchService(client=client)
        assert await service.search_images(SearchRequest("dog")) == []
