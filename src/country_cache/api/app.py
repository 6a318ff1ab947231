from typing import Any

from fastapi import FastAPI, Query
from fastapi.middleware.cors import CORSMiddleware

from country_cache.api.dependencies import HandlerDep, lifespan
from country_cache.config import settings
from country_cache.dto import (
    CacheStatusResponse,
    CountryListResponse,
    HealthCheckResponse,
    SelectCountryRequest,
    UpdateCountriesRequest,
)
from country_cache.entities import SortCriteria
from country_cache.policies import DataSourcePolicy

app = FastAPI(
    title="Country Cache API",
    description="Country information with policy-driven remote/local caching",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,  # type: ignore[arg-type]
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/")
async def root() -> dict[str, Any]:
    """Root endpoint with API information."""
    return {
        "name": "Country Cache API",
        "version": "0.1.0",
        "description": "Country information with policy-driven remote/local caching",
        "endpoints": {
            "countries": "/countries",
            "search": "/countries/search",
            "filter": "/countries/filter",
            "cache": "/countries/cache",
            "selected": "/selected",
            "health": "/health",
            "docs": "/docs",
        },
    }


@app.get("/health", response_model=HealthCheckResponse)
async def health(handler: HandlerDep) -> HealthCheckResponse:
    """Health check endpoint."""
    return await handler.health_check()


@app.get("/countries", response_model=CountryListResponse)
async def list_countries(
    handler: HandlerDep,
    policy: DataSourcePolicy | None = None,
) -> CountryListResponse:
    """Fetch all countries, optionally with an explicit data source policy."""
    return await handler.list_countries(policy)


@app.get("/countries/search", response_model=CountryListResponse)
async def search_countries(
    handler: HandlerDep,
    q: str = Query(..., description="Search text"),
    session: str | None = Query(
        None, description="Client session; a new search cancels this session's previous one"
    ),
) -> CountryListResponse:
    """Search countries remotely, falling back to the local collection."""
    return await handler.search_countries(q, session)


@app.get("/countries/filter", response_model=CountryListResponse)
async def filter_countries(
    handler: HandlerDep,
    q: str = Query("", description="Case-insensitive text matched on name, capital and region"),
    sort: SortCriteria | None = None,
) -> CountryListResponse:
    """Filter and sort the last fetched countries in memory."""
    return await handler.filter_countries(q, sort)


@app.put("/countries/cache", response_model=CountryListResponse)
async def update_cache(handler: HandlerDep, request: UpdateCountriesRequest) -> CountryListResponse:
    """Replace the locally cached countries and mark them fresh."""
    return await handler.update_cache(request)


@app.delete("/countries/cache")
async def clear_cache(handler: HandlerDep) -> dict:
    """Remove the locally cached countries and their freshness timestamp."""
    return await handler.clear_cache()


@app.get("/countries/cache/status", response_model=CacheStatusResponse)
async def cache_status(handler: HandlerDep) -> CacheStatusResponse:
    """Report whether the local countries are present and fresh."""
    return await handler.cache_status()


@app.get("/selected", response_model=CountryListResponse)
async def get_selected(handler: HandlerDep) -> CountryListResponse:
    """Get the selected countries, defaulting to the configured country."""
    return await handler.get_selected()


@app.post("/selected", response_model=CountryListResponse)
async def add_selected(handler: HandlerDep, request: SelectCountryRequest) -> CountryListResponse:
    """Add a country to the selection."""
    return await handler.add_selected(request)


@app.delete("/selected/{country_id}", response_model=CountryListResponse)
async def remove_selected(handler: HandlerDep, country_id: str) -> CountryListResponse:
    """Remove a country from the selection."""
    return await handler.remove_selected(country_id)


@app.delete("/selected")
async def clear_selected(handler: HandlerDep) -> dict:
    """Remove every selected country."""
    return await handler.clear_selected()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "country_cache.api.app:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_reload,
    )
