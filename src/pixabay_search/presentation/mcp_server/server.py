"""
Pixabay Search MCP Server

A standalone Model Context Protocol server for stock photo search.

Architecture:
- instructions.py: SERVER_INSTRUCTIONS for AI agents
- tools/: Tool implementations
- container: DI container (dependency-injector) for service lifecycle
"""

from __future__ import annotations

import logging
import os
import sys
from contextlib import AbstractAsyncContextManager, asynccontextmanager
from typing import TYPE_CHECKING, Any, cast

from mcp.server.fastmcp import FastMCP
from mcp.server.transport_security import TransportSecuritySettings

from pixabay_search.container import ApplicationContainer, config_from_env, shutdown_container

from .instructions import SERVER_INSTRUCTIONS
from .tools import register_all_tools

if TYPE_CHECKING:
    from collections.abc import AsyncIterator, Callable

    from pixabay_search.application.image_search import ImageSearchService

logger = logging.getLogger(__name__)

# ── Module-level DI container ──────────────────────────────────────────────
_container: ApplicationContainer | None = None


def get_container() -> ApplicationContainer:
    """Get the application DI container.

    Raises:
        RuntimeError: If ``create_server()`` has not been called yet.
    """
    if _container is None:
        msg = "Container not initialized. Call create_server() first."
        raise RuntimeError(msg)
    return _container


def _make_lifespan(
    container: ApplicationContainer,
) -> Callable[[FastMCP[Any]], AbstractAsyncContextManager[ApplicationContainer]]:
    """Create a FastMCP lifespan handler bound to *container*."""

    @asynccontextmanager
    async def _lifespan(server: FastMCP[Any]) -> AsyncIterator[ApplicationContainer]:
        logger.info("Lifecycle: startup, resources ready")
        try:
            yield container
        finally:
            await shutdown_container(container)
            logger.info("Lifecycle: session closed, Pixabay connection pool released")

    return _lifespan


def create_server(
    api_key: str | None = None,
    name: str = "pixabay-search",
    disable_security: bool = False,
    json_response: bool = False,
    stateless_http: bool = False,
    config: dict[str, Any] | None = None,
) -> FastMCP:
    """
    Create and configure the Pixabay Search MCP server.

    Args:
        api_key: Pixabay API key (overrides PIXABAY_API_KEY).
        name: Server name.
        disable_security: Disable DNS rebinding protection (needed for remote access).
        json_response: Use JSON responses instead of SSE.
        stateless_http: Use stateless HTTP mode (no session management).
        config: Container configuration (defaults to environment variables).

    Returns:
        Configured FastMCP server instance.
    """
    global _container
    logger.info("Initializing Pixabay Search MCP Server...")

    # ── DI container ────────────────────────────────────────────────────
    settings = dict(config) if config is not None else config_from_env()
    if api_key:
        settings["api_key"] = api_key

    _container = ApplicationContainer()
    _container.config.from_dict(settings)

    service = cast("ImageSearchService", _container.image_search_service())

    # ── Transport security ──────────────────────────────────────────────
    if disable_security:
        transport_security = TransportSecuritySettings(enable_dns_rebinding_protection=False)
        logger.info("DNS rebinding protection disabled for remote access")
    else:
        transport_security = None

    mcp = FastMCP(
        name,
        instructions=SERVER_INSTRUCTIONS,
        transport_security=transport_security,
        json_response=json_response,
        stateless_http=stateless_http,
        lifespan=_make_lifespan(_container),
    )

    register_all_tools(mcp, service)

    logger.info("Pixabay Search MCP Server initialized successfully")
    return mcp


def main():
    """Run the MCP server over stdio."""

    # stdout carries the MCP protocol; logs go to stderr
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )
    # httpx logs full request URLs, which carry the API key
    logging.getLogger("httpx").setLevel(logging.WARNING)

    # API key: CLI arg → env var
    api_key = sys.argv[1] if len(sys.argv) > 1 else os.environ.get("PIXABAY_API_KEY", "").strip() or None

    server = create_server(api_key=api_key)
    server.run()


if __name__ == "__main__":
    main()
