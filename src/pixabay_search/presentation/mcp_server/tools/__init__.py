"""
Pixabay Search MCP Tools

✅ Image search (2):
- search_stock_images: enriched, relevance-ranked stock photo search
- analyze_image_query: explain query enrichment without calling Pixabay

Usage:
    from .tools import register_all_tools
    register_all_tools(mcp, service)
"""

from mcp.server.fastmcp import FastMCP

from pixabay_search.application.image_search import ImageSearchService

from .image_search import register_image_search_tools


def register_all_tools(mcp: FastMCP, service: ImageSearchService):
    """Register every MCP tool against one shared ImageSearchService."""
    register_image_search_tools(mcp, service)  # search_stock_images, analyze_image_query


__all__ = ["register_all_tools", "register_image_search_tools"]
