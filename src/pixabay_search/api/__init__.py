"""HTTP API (FastAPI) for the image search pipeline."""

from .server import DEFAULT_API_PORT, create_api_server

__all__ = ["create_api_server", "DEFAULT_API_PORT"]
