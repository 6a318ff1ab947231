"""Dependency injection configuration for FastAPI app.

Uses FastAPI's app.state pattern for storing service instances.

Pattern:
    - Services stored in app.state during lifespan
    - Dependency functions retrieve from request.app.state
    - Clean separation, no global mutable state
"""

import logging
from contextlib import asynccontextmanager
from typing import Annotated

from fastapi import Depends, FastAPI, Request

from country_cache.config import settings
from country_cache.handlers import CountryHandler
from country_cache.repositories import (
    InMemoryStorage,
    RedisStorage,
    RestCountriesSource,
    StoredCountrySource,
    TieredCountryRepository,
)
from country_cache.services import (
    CountriesMemoryCache,
    CountrySelectionService,
    FetchCountriesService,
    SearchCountriesService,
    SelectedCountriesService,
)

logger = logging.getLogger(__name__)


def get_handler(request: Request) -> CountryHandler:
    """Dependency injection for CountryHandler from app.state.

    Args:
        request: FastAPI Request object

    Returns:
        The CountryHandler instance from app.state

    Raises:
        RuntimeError: If handler is not initialized
    """
    handler = getattr(request.app.state, "country_handler", None)
    if handler is None:
        raise RuntimeError("CountryHandler not initialized. Check lifespan setup.")
    return handler


def build_handler(
    storage: RedisStorage | InMemoryStorage,
    remote: RestCountriesSource,
) -> CountryHandler:
    """Wire every layer on top of a storage backend and a remote source.

    Args:
        storage: Persistent store for the local source
        remote: Network source

    Returns:
        A ready CountryHandler
    """
    local = StoredCountrySource(storage=storage)
    repository = TieredCountryRepository(remote=remote, local=local)
    memory_cache = CountriesMemoryCache()
    search_service = SearchCountriesService(repository)

    return CountryHandler(
        repository=repository,
        fetch_service=FetchCountriesService(repository, memory_cache=memory_cache),
        search_service=search_service,
        selection_service=CountrySelectionService(
            selected=SelectedCountriesService(repository),
            search=search_service,
        ),
        memory_cache=memory_cache,
        storage=storage,
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for FastAPI app.

    Initializes all layers and stores them in app.state:
    1. Storage backend (Redis or in-memory, from settings)
    2. Remote source (REST Countries)
    3. Handler with its repository and services - app.state.country_handler

    Args:
        app: The FastAPI application instance

    Yields:
        None

    Cleanup:
        Closes the HTTP client and Redis pool, removes state on shutdown
    """
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if settings.storage_backend == "memory":
        storage: RedisStorage | InMemoryStorage = InMemoryStorage()
    else:
        storage = RedisStorage.create()
    remote = RestCountriesSource.create()

    app.state.storage = storage
    app.state.remote = remote
    app.state.country_handler = build_handler(storage=storage, remote=remote)

    logger.info("Country cache initialized")
    logger.info("Storage backend: %s", settings.storage_backend)
    logger.info("Countries API: %s", settings.countries_api_url)
    logger.info("Freshness window: %ss", settings.cache_expiration_seconds)

    yield

    # Cleanup - close clients and remove from app.state
    await remote.close()
    if isinstance(storage, RedisStorage):
        await storage.close()
    del app.state.country_handler
    del app.state.remote
    del app.state.storage
    logger.info("Country cache shut down")


# Type alias for cleaner dependency injection
HandlerDep = Annotated[CountryHandler, Depends(get_handler)]
