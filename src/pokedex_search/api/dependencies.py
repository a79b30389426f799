"""Dependency injection configuration for FastAPI app.

Uses FastAPI's app.state pattern for storing service instances.

Pattern:
    - Services stored in app.state during lifespan
    - Dependency functions retrieve from request.app.state
    - Clean separation, no global mutable state
"""

import asyncio
import contextlib
import logging
from contextlib import asynccontextmanager
from typing import Annotated

from fastapi import Depends, FastAPI, Request

from pokedex_search.config import configure_logging, settings
from pokedex_search.errors import CatalogUnavailableError
from pokedex_search.handlers import SearchHandler
from pokedex_search.repositories import GeminiTextGenerator, PokeApiClient
from pokedex_search.services import (
    DatasetCache,
    FeatureExtractor,
    PokedexService,
    RankingService,
    SearchHistoryService,
    SearchService,
)

logger = logging.getLogger(__name__)


def get_handler(request: Request) -> SearchHandler:
    """Dependency injection for SearchHandler from app.state.

    Args:
        request: FastAPI Request object

    Returns:
        The SearchHandler instance from app.state

    Raises:
        RuntimeError: If handler is not initialized
    """
    handler = getattr(request.app.state, "search_handler", None)
    if handler is None:
        raise RuntimeError("SearchHandler not initialized. Check lifespan setup.")
    return handler


async def _warm_cache(cache: DatasetCache) -> None:
    try:
        await cache.ensure_ready()
    except CatalogUnavailableError:
        logger.error("Catalog warm-up failed; searches will report the catalog as unavailable")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for FastAPI app.

    Initializes all layers and stores them in app.state:
    1. Repositories (PokeAPI client, Gemini generator)
    2. Dataset cache, owned by the app for the process lifetime
    3. Services (extraction, ranking, history, search, lookup)
    4. Handler - stored in app.state.search_handler

    Cleanup:
        Stops any catalog population, closes the HTTP client and removes all
        services from app.state on shutdown
    """
    configure_logging()

    client = PokeApiClient.create()
    generator = GeminiTextGenerator.create()
    cache = DatasetCache(source=client)
    history = SearchHistoryService()

    search_service = SearchService(
        extractor=FeatureExtractor(generator=generator),
        ranking=RankingService(cache=cache),
        history=history,
    )
    search_handler = SearchHandler(
        search_service=search_service,
        cache=cache,
        pokedex_service=PokedexService(client=client),
        history=history,
        generator=generator,
    )

    app.state.dataset_cache = cache
    app.state.search_service = search_service
    app.state.search_handler = search_handler

    logger.info("Search service initialized (catalog: %s)", client.base_url)
    if not generator.is_available():
        logger.warning("GEMINI_API_KEY is not set; searches will return no results")

    warm_task = None
    if settings.warm_cache_on_startup:
        warm_task = asyncio.create_task(_warm_cache(cache))

    yield

    if warm_task is not None and not warm_task.done():
        warm_task.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await warm_task

    await cache.aclose()
    await client.close()
    del app.state.search_handler
    del app.state.search_service
    del app.state.dataset_cache
    logger.info("Search service shut down")


# Type alias for cleaner dependency injection
HandlerDep = Annotated[SearchHandler, Depends(get_handler)]
