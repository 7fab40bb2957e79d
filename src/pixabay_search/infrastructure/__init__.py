"""
Infrastructure Layer - External Services

Contains:
- sources: HTTP clients for image providers (Pixabay)
"""

from .sources import BaseAPIClient, PixabayClient

__all__ = ["BaseAPIClient", "PixabayClient"]
