"""
MCP Server Instructions - usage guide for AI agents.

Kept apart from server.py so it can be edited without touching wiring.
"""

from __future__ import annotations

SERVER_INSTRUCTIONS = """
Pixabay Search MCP Server - stock photo finder for AI agents

## Quick search
Describe the picture in plain words; commas or spaces both work:

    search_stock_images(query="dental clinic magazine")

The server drops plan words ("free", "pro", "child"), picks the best
Pixabay category, adds context terms and re-ranks results by tag match
and popularity. The result is a JSON array of Pixabay image records
(webformatURL, largeImageURL, tags, likes, downloads, ...).

## Localized search
Pass a language or region label; unknown labels fall back to English:

    search_stock_images(query="pet grooming", lang="china")

## Steering the category
If the words are ambiguous, give a content hint:

    search_stock_images(query="news blog", category="pet")

## Browsing by category
by_category=true runs one small search per matched category and returns
an object keyed by category name.

## Debugging a query
analyze_image_query(query=...) shows the dropped words, chosen category
and final search string without calling Pixabay.
"""
