"""
External image providers.

Each client maps provider payloads to domain entities and reports every
failure as an empty result.
"""

from .base_client import BaseAPIClient
from .pixabay import PIXABAY_API_URL, PixabayClient

__all__ = [
    "BaseAPIClient",
    "PixabayClient",
    "PIXABAY_API_URL",
]
