"""
HTTP API Server for stock image search.

Exposes the image search pipeline as a read-only REST endpoint:

    GET /v1/get-images?query=dental,clinic&lang=en&per_page=20
    GET /health
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from contextlib import asynccontextmanager
from typing import Any

from fastapi import Depends, FastAPI, HTTPException, Query
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

from pixabay_search.application.image_search import ImageSearchService
from pixabay_search.container import ApplicationContainer, config_from_env, shutdown_container
from pixabay_search.domain.entities.query import DEFAULT_RESULT_LIMIT, SearchRequest
from pixabay_search.shared.exceptions import ValidationError

logger = logging.getLogger(__name__)

DEFAULT_API_PORT = 8765


class HealthResponse(BaseModel):
    """Health check response."""
    status: str
    service: str
    api_key_configured: bool


def allow_all() -> bool:
    """Default permission check: the endpoint is public."""
    return True


def create_api_server(
    container: ApplicationContainer | None = None,
    service: ImageSearchService | None = None,
    permission_check: Callable[[], bool] = allow_all,
) -> FastAPI:
    """
    Create the FastAPI server.

    Args:
        container: DI container (built from environment variables if None)
        service: Pre-built service (skips the container's provider)
        permission_check: Returns False to reject a request with 403

    Returns:
        Configured FastAPI instance.
    """
    if container is None:
        container = ApplicationContainer()
        container.config.from_dict(config_from_env())

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("HTTP API server initialized")
        try:
            yield
        finally:
            if service is None:
                await shutdown_container(container)
            logger.info("HTTP API server shutting down")

    app = FastAPI(
        title="Pixabay Image Search API",
        description="Enriches free-text image queries, fetches Pixabay photos "
                    "and returns them re-ranked by relevance.",
        version="0.1.0",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    def get_service() -> ImageSearchService:
        return service if service is not None else container.image_search_service()

    def require_permission() -> None:
        if not permission_check():
            raise HTTPException(status_code=403, detail="Forbidden")

    @app.get("/health", response_model=HealthResponse)
    async def health() -> HealthResponse:
        return HealthResponse(
            status="ok",
            service="pixabay-search",
            api_key_configured=bool(container.config.api_key()),
        )

    @app.get("/v1/get-images", dependencies=[Depends(require_permission)])
    async def get_images(
        query: str = Query(..., description="Free text, comma- or space-delimited"),
        lang: str = Query("en", description="Language/region label, e.g. 'china', 'rtl'"),
        category: str | None = Query(None, description="Content-type hint, e.g. 'pet'"),
        per_page: int = Query(DEFAULT_RESULT_LIMIT, ge=1, le=200),
        fan_out: bool = Query(False, description="One provider call per matched category"),
        image_service: ImageSearchService = Depends(get_service),
    ) -> Any:
        try:
            request = SearchRequest(
                raw_query=query,
                language_label=lang,
                content_category_hint=category or None,
                result_limit=per_page,
            )
        except ValidationError as e:
            raise HTTPException(status_code=422, detail=e.to_dict()) from e

        if fan_out:
            return await image_service.search_by_category(request)
        return await image_service.search_images(request)

    return app
