"""
Base API Client - Common HTTP request pattern with rate limiting and circuit breaker.

Provides a reusable base class for provider clients with:
- A pooled httpx.AsyncClient, created on first use and re-created after close()
- Rate limiting (configurable interval between requests)
- Circuit breaker for fault tolerance
- Consistent error handling and logging: every failure is logged and
  reported to the caller as ``None``; nothing is retried
"""

from __future__ import annotations

import asyncio
import logging
import time
from typing import Any

import httpx
from typing_extensions import Self

from pixabay_search.shared.async_utils import CircuitBreaker
from pixabay_search.shared.exceptions import ParseError, RateLimitError

logger = logging.getLogger(__name__)


class BaseAPIClient:
    """
    Base class for external JSON API clients.

    Subclasses set `_service_name` and can override `_redact_params()` to
    hide credentials from log lines.

    The connection pool outlives any single server session: ``close()``
    releases it and the next request opens a fresh one.
    """

    _service_name: str = "API"

    def __init__(
        self,
        timeout: float = 20.0,
        min_interval: float = 0.0,
        headers: dict[str, str] | None = None,
        circuit_breaker: CircuitBreaker | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """
        Initialize base client.

        Args:
            timeout: Request timeout in seconds; exceeding it is a failure
            min_interval: Minimum seconds between requests (rate limiting)
            headers: Default headers for all requests
            circuit_breaker: Optional circuit breaker for fault tolerance.
                             If None, a default one is created (threshold=10, recovery=60s).
            transport: Optional httpx transport (e.g. httpx.MockTransport in tests)
        """
        self._timeout = timeout
        self._min_interval = min_interval
        self._last_request_time = 0.0
        self._headers = dict(headers or {})
        self._transport = transport
        self._client: httpx.AsyncClient | None = None
        self._circuit_breaker = circuit_breaker or CircuitBreaker(failure_threshold=10, recovery_timeout=60.0)

    @property
    def timeout(self) -> float:
        return self._timeout

    def _get_client(self) -> httpx.AsyncClient:
        """Get or create the pooled HTTP client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                timeout=self._timeout,
                headers=self._headers,
                transport=self._transport,
                limits=httpx.Limits(
                    max_connections=20,
                    max_keepalive_connections=10,
                    keepalive_expiry=30.0,
                ),
            )
        return self._client

    async def _rate_limit(self) -> None:
        """Enforce minimum interval between requests."""
        elapsed = time.time() - self._last_request_time
        if elapsed < self._min_interval:
            await asyncio.sleep(self._min_interval - elapsed)
        self._last_request_time = time.time()

    async def _make_request(
        self,
        url: str,
        *,
        params: dict[str, str] | None = None,
    ) -> dict[str, Any] | list[Any] | None:
        """
        Make one HTTP GET request under circuit breaker protection.

        Args:
            url: Full request URL
            params: Query parameters (percent-encoded by httpx)

        Returns:
            Parsed JSON body, or None on any failure
        """
        await self._rate_limit()
        logger.debug(f"{self._service_name} GET {url} params={self._redact_params(params)}")

        try:
            async with self._circuit_breaker:
                response = await self._get_client().get(url, params=params)
                response.raise_for_status()
                return self._parse_response(response)

        except httpx.HTTPStatusError as e:
            logger.error(
                f"{self._service_name} HTTP error {e.response.status_code}: {e.response.reason_phrase}"
            )
            return None
        except httpx.TimeoutException as e:
            logger.error(f"{self._service_name} request timed out after {self._timeout}s: {e}")
            return None
        except httpx.RequestError as e:
            logger.error(f"{self._service_name} request failed: {e}")
            return None
        except ParseError as e:
            logger.warning(f"{e}")
            return None
        except RateLimitError:
            logger.warning(f"{self._service_name}: Circuit breaker open, skipping request")
            return None

    def _parse_response(self, response: httpx.Response) -> dict[str, Any] | list[Any]:
        try:
            return response.json()
        except ValueError as e:
            raise ParseError(f"response body is not valid JSON ({e})", source=self._service_name) from e

    def _redact_params(self, params: dict[str, str] | None) -> dict[str, str]:
        """Params safe to log. Override to hide credentials."""
        return dict(params or {})

    async def close(self) -> None:
        """Release the connection pool; the next request opens a new one."""
        if self._client is not None and not self._client.is_closed:
            await self._client.aclose()
        self._client = None

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(self, *args: object) -> None:
        await self.close()
