"""
Application Layer - Use Cases

Contains:
- image_search: query enrichment, provider orchestration, ranking
"""

from .image_search import ImageSearchResult, ImageSearchService, QueryEnricher

__all__ = ["ImageSearchService", "ImageSearchResult", "QueryEnricher"]
