"""
Image Search Tools - Pixabay stock photo search for agents.

Tools:
- search_stock_images: Enriched, relevance-ranked stock photo search
- analyze_image_query: Show how a query would be enriched (no provider call)
"""

import json
import logging
from typing import Union

from mcp.server.fastmcp import FastMCP

from pixabay_search.application.image_search import ImageSearchService
from pixabay_search.domain.entities.query import DEFAULT_RESULT_LIMIT, SearchRequest
from pixabay_search.shared.exceptions import InvalidQueryError, ValidationError

from ._common import InputNormalizer, ResponseFormatter

logger = logging.getLogger(__name__)


def _build_request(
    query: str,
    lang: Union[str, None],
    category: Union[str, None],
    per_page: Union[int, str, None],
) -> SearchRequest:
    return SearchRequest(
        raw_query=InputNormalizer.normalize_query(query),
        language_label=InputNormalizer.normalize_label(lang, default="en"),
        content_category_hint=InputNormalizer.normalize_label(category) or None,
        result_limit=InputNormalizer.normalize_limit(per_page, default=DEFAULT_RESULT_LIMIT),
    )


def register_image_search_tools(mcp: FastMCP, service: ImageSearchService):
    """Register stock image search MCP tools."""

    @mcp.tool()
    async def search_stock_images(
        query: str,
        lang: str = "en",
        category: Union[str, None] = None,
        per_page: Union[int, str] = DEFAULT_RESULT_LIMIT,
        by_category: Union[bool, str] = False,
    ) -> str:
        """
        🖼️ Search Pixabay stock photos for a free-text description.

        The query is cleaned (plan words like "free"/"pro"/"child" are
        dropped), classified into a Pixabay category, boosted with context
        terms and localized, then results are re-ranked by tag relevance
        and popularity.

        ═══════════════════════════════════════════════════════════════
        EXAMPLES:
        ═══════════════════════════════════════════════════════════════

            search_stock_images("dental clinic magazine")
            search_stock_images("pet grooming", lang="china")
            search_stock_images("news blog", category="pet", per_page=5)

        ═══════════════════════════════════════════════════════════════

        Args:
            query: Comma- or space-delimited description
            lang: Language/region label (e.g. "en", "china", "rtl")
            category: Optional content-type hint (e.g. "pet", "dental")
            per_page: Maximum images to return (1-200, default 20)
            by_category: One search per matched category, grouped by category

        Returns:
            JSON array of Pixabay image records in ranked order, or a JSON
            object keyed by category when by_category is true
        """
        try:
            request = _build_request(query, lang, category, per_page)
        except ValidationError as e:
            return e.to_agent_message()

        if InputNormalizer.normalize_bool(by_category):
            grouped = await service.search_by_category(request)
            return json.dumps(grouped, ensure_ascii=False)

        images = await service.search_images(request)
        logger.info(f"search_stock_images({request.raw_query!r}) -> {len(images)} images")
        return json.dumps(images, ensure_ascii=False)

    @mcp.tool()
    def analyze_image_query(
        query: str,
        lang: str = "en",
        category: Union[str, None] = None,
    ) -> str:
        """
        🔍 Explain how a description is turned into a Pixabay query.

        No provider call is made. Useful to see which words were dropped,
        which category was chosen and what search string would be sent.

        Args:
            query: Comma- or space-delimited description
            lang: Language/region label
            category: Optional content-type hint

        Returns:
            JSON object with tokens, category, search string and language
        """
        query = InputNormalizer.normalize_query(query)
        if not query:
            return ResponseFormatter.error(InvalidQueryError(query), tool_name="analyze_image_query")

        request = _build_request(query, lang, category, None)
        report = service.enricher.analyze(request)
        return json.dumps(report.to_dict(), ensure_ascii=False)
