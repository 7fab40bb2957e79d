"""Presentation layer: MCP server exposing the image search tools."""
