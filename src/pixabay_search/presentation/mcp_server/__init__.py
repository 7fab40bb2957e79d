"""
Pixabay Search MCP Server

Usage as standalone server:
    python -m pixabay_search.presentation.mcp_server

Or in mcp.json:
    {
        "servers": {
            "pixabay-search": {
                "type": "stdio",
                "command": "python",
                "args": ["-m", "pixabay_search.presentation.mcp_server"],
                "env": {"PIXABAY_API_KEY": "..."}
            }
        }
    }

Usage for integration:
    from pixabay_search.presentation.mcp_server import create_server, register_all_tools

    server = create_server(api_key="...")
    server.run()
"""

from __future__ import annotations

from .server import create_server, main
from .tools import register_all_tools

__all__ = ["create_server", "main", "register_all_tools"]
