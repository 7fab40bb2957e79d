"""
Application DI Container (dependency-injector).

Centralizes service creation and lifecycle management.

Usage::

    from pixabay_search.container import ApplicationContainer, config_from_env

    container = ApplicationContainer()
    container.config.from_dict(config_from_env())

    service = container.image_search_service()

    # In tests, override any provider:
    container.pixabay_client.override(providers.Object(mock_client))
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from typing import Any

from dependency_injector import containers, providers

from pixabay_search.shared.exceptions import ConfigurationError, ErrorContext

logger = logging.getLogger(__name__)

DEFAULT_CONFIG: dict[str, Any] = {
    "api_key": "",
    "base_url": "https://pixabay.com/api/",
    "timeout": 20.0,
    "fetch_width": 50,
    "fan_out_per_page": 3,
    "min_likes": 10,
    "safesearch": True,
    "min_interval": 0.0,
}


def _env_bool(value: str | None, default: bool) -> bool:
    if value is None or value == "":
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _env_number(env: Mapping[str, str], name: str, key: str, cast: type) -> Any:
    raw = env.get(name)
    if not raw:
        return DEFAULT_CONFIG[key]
    try:
        return cast(raw)
    except ValueError as e:
        raise ConfigurationError(
            f"{name} must be a number, got {raw!r}",
            context=ErrorContext(input_value=raw, suggestion=f"Unset {name} or give a {cast.__name__}"),
        ) from e


def config_from_env(environ: Mapping[str, str] | None = None) -> dict[str, Any]:
    """
    Build container configuration from environment variables.

    Variables:
        PIXABAY_API_KEY, PIXABAY_BASE_URL, PIXABAY_TIMEOUT,
        PIXABAY_FETCH_WIDTH, PIXABAY_FAN_OUT_PER_PAGE, PIXABAY_MIN_LIKES,
        PIXABAY_SAFESEARCH, PIXABAY_MIN_INTERVAL

    Raises:
        ConfigurationError: If a numeric variable does not parse
    """
    env = os.environ if environ is None else environ
    return {
        "api_key": env.get("PIXABAY_API_KEY", DEFAULT_CONFIG["api_key"]),
        "base_url": env.get("PIXABAY_BASE_URL") or DEFAULT_CONFIG["base_url"],
        "timeout": _env_number(env, "PIXABAY_TIMEOUT", "timeout", float),
        "fetch_width": _env_number(env, "PIXABAY_FETCH_WIDTH", "fetch_width", int),
        "fan_out_per_page": _env_number(env, "PIXABAY_FAN_OUT_PER_PAGE", "fan_out_per_page", int),
        "min_likes": _env_number(env, "PIXABAY_MIN_LIKES", "min_likes", int),
        "safesearch": _env_bool(env.get("PIXABAY_SAFESEARCH"), DEFAULT_CONFIG["safesearch"]),
        "min_interval": _env_number(env, "PIXABAY_MIN_INTERVAL", "min_interval", float),
    }


def _create_pixabay_client(
    api_key: str,
    base_url: str,
    timeout: float,
    fetch_width: int,
    safesearch: bool,
    min_interval: float,
) -> object:
    """Lazy factory for PixabayClient (avoids top-level import)."""
    from pixabay_search.infrastructure.sources import PixabayClient

    return PixabayClient(
        api_key=api_key,
        base_url=base_url,
        timeout=timeout,
        fetch_width=fetch_width,
        safesearch=safesearch,
        min_interval=min_interval,
    )


def _create_image_search_service(
    client: object,
    min_likes: int,
    fetch_width: int,
    fan_out_per_page: int,
) -> object:
    """Lazy factory for ImageSearchService."""
    from pixabay_search.application.image_search import ImageSearchService

    return ImageSearchService(
        client=client,
        min_likes=min_likes,
        fetch_width=fetch_width,
        fan_out_per_page=fan_out_per_page,
    )


class ApplicationContainer(containers.DeclarativeContainer):
    """Central DI container for the image search application.

    Manages creation and lifecycle of all core services:
    - ``pixabay_client``: pooled httpx client for the Pixabay API
    - ``image_search_service``: enrichment + fetch + ranking use case
    """

    config = providers.Configuration(default=DEFAULT_CONFIG)

    pixabay_client = providers.Singleton(
        _create_pixabay_client,
        api_key=config.api_key,
        base_url=config.base_url,
        timeout=config.timeout,
        fetch_width=config.fetch_width,
        safesearch=config.safesearch,
        min_interval=config.min_interval,
    )

    image_search_service = providers.Singleton(
        _create_image_search_service,
        client=pixabay_client,
        min_likes=config.min_likes,
        fetch_width=config.fetch_width,
        fan_out_per_page=config.fan_out_per_page,
    )


async def shutdown_container(container: ApplicationContainer) -> None:
    """Release the shared provider client's connection pool.

    The client itself stays registered and reopens its pool on the next
    request, so this is safe at the end of every server session.
    """
    client = container.pixabay_client()
    close = getattr(client, "close", None)
    if close is not None:
        await close()
        logger.info("Pixabay connection pool released")


__all__ = ["ApplicationContainer", "config_from_env", "shutdown_container", "DEFAULT_CONFIG"]
