#!/usr/bin/env python3
"""
Pixabay Search Server - HTTP Mode

Runs either the REST API (GET /v1/get-images) or the MCP server over an
HTTP transport, so remote clients can connect.

Usage:
    # REST API (default)
    python run_server.py --port 8765

    # MCP over SSE / streamable-http
    python run_server.py --surface mcp --transport sse --port 8765
    python run_server.py --surface mcp --transport streamable-http

Environment Variables:
    PIXABAY_API_KEY: Pixabay API key
    API_HOST: Server host (default: 0.0.0.0)
    API_PORT: Server port (default: 8765)
"""

import argparse
import logging
import os

import uvicorn

from pixabay_search.api import DEFAULT_API_PORT, create_api_server
from pixabay_search.container import ApplicationContainer, config_from_env
from pixabay_search.presentation.mcp_server import create_server

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
# httpx logs full request URLs, which carry the API key
logging.getLogger("httpx").setLevel(logging.WARNING)
logger = logging.getLogger(__name__)


def main():
    parser = argparse.ArgumentParser(
        description="Run the Pixabay Search server in HTTP mode"
    )
    parser.add_argument(
        "--api-key",
        default=os.environ.get("PIXABAY_API_KEY"),
        help="Pixabay API key"
    )
    parser.add_argument(
        "--surface",
        choices=["api", "mcp"],
        default="api",
        help="REST API or MCP server (default: api)"
    )
    parser.add_argument(
        "--transport",
        choices=["sse", "streamable-http"],
        default="sse",
        help="MCP transport protocol (default: sse)"
    )
    parser.add_argument(
        "--host",
        default=os.environ.get("API_HOST", "0.0.0.0"),
        help="Server host (default: 0.0.0.0)"
    )
    parser.add_argument(
        "--port",
        type=int,
        default=int(os.environ.get("API_PORT", str(DEFAULT_API_PORT))),
        help=f"Server port (default: {DEFAULT_API_PORT})"
    )

    args = parser.parse_args()

    config = config_from_env()
    if args.api_key:
        config["api_key"] = args.api_key

    logger.info("Creating Pixabay Search server...")
    logger.info(f"  Surface: {args.surface}")
    logger.info(f"  API Key: {'Set' if config['api_key'] else 'Not set'}")
    logger.info(f"  Host: {args.host}")
    logger.info(f"  Port: {args.port}")

    if args.surface == "api":
        container = ApplicationContainer()
        container.config.from_dict(config)
        app = create_api_server(container=container)
        logger.info("Endpoint: GET /v1/get-images")
    else:
        server = create_server(config=config, disable_security=True)
        if args.transport == "sse":
            app = server.sse_app()
            logger.info("SSE endpoint: /sse")
        else:
            app = server.streamable_http_app()
            logger.info("Streamable HTTP endpoint: /mcp")

    logger.info(f"Starting server at http://{args.host}:{args.port}")
    uvicorn.run(app, host=args.host, port=args.port, log_level="info")


if __name__ == "__main__":
    main()
