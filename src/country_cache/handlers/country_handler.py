"""HTTP handlers for country operations.

Handlers convert between DTOs (API contracts) and service calls.
They handle HTTP concerns like status codes and error translation.
"""

import asyncio

from fastapi import HTTPException, status

from country_cache.dto import (
    CacheStatusResponse,
    CountryItem,
    CountryListResponse,
    HealthCheckResponse,
    SelectCountryRequest,
    UpdateCountriesRequest,
)
from country_cache.entities import Country, SortCriteria
from country_cache.errors import (
    CountryCacheError,
    InvalidData,
    NetworkFailure,
    NotFound,
)
from country_cache.policies import DataSourcePolicy
from country_cache.protocols import PersistentStorage
from country_cache.repositories import TieredCountryRepository
from country_cache.services import (
    CountriesMemoryCache,
    CountrySelectionService,
    FetchCountriesService,
    SearchCountriesService,
    SelectionFullError,
)

_STATUS_BY_ERROR: dict[type[CountryCacheError], int] = {
    NotFound: status.HTTP_404_NOT_FOUND,
    InvalidData: status.HTTP_422_UNPROCESSABLE_ENTITY,
    NetworkFailure: status.HTTP_503_SERVICE_UNAVAILABLE,
}


def _http_error(action: str, error: CountryCacheError) -> HTTPException:
    code = _STATUS_BY_ERROR.get(type(error), status.HTTP_500_INTERNAL_SERVER_ERROR)
    return HTTPException(status_code=code, detail=f"Failed to {action}: {error}")


def _country_list(countries: list[Country]) -> CountryListResponse:
    return CountryListResponse(
        count=len(countries),
        countries=[CountryItem.from_entity(country) for country in countries],
    )


class CountryHandler:
    """HTTP handlers for country operations.

    This handler delegates business logic to the services and handles
    HTTP-specific concerns like:
    - Converting entities to DTOs
    - Setting appropriate status codes
    - Translating country cache errors to HTTP errors

    Example:
        ```python
        handler = CountryHandler(
            repository=repository,
            fetch_service=FetchCountriesService(repository, memory_cache),
            search_service=SearchCountriesService(repository),
            selection_service=selection,
            memory_cache=memory_cache,
            storage=storage,
        )

        @app.get("/countries", response_model=CountryListResponse)
        async def list_countries(policy: DataSourcePolicy | None = None):
            return await handler.list_countries(policy)
        ```
    """

    def __init__(
        self,
        repository: TieredCountryRepository,
        fetch_service: FetchCountriesService,
        search_service: SearchCountriesService,
        selection_service: CountrySelectionService,
        memory_cache: CountriesMemoryCache,
        storage: PersistentStorage,
    ) -> None:
        """Initialize the country handler.

        Args:
            repository: The tiered country repository (required).
            fetch_service: Fetch-all use case (required).
            search_service: Search and sort use case (required).
            selection_service: Selection rules (required).
            memory_cache: Last fetched country list (required).
            storage: Persistent store, probed by the health endpoint (required).
        """
        self._repository = repository
        self._fetch = fetch_service
        self._search = search_service
        self._selection = selection_service
        self._memory_cache = memory_cache
        self._storage = storage

    async def list_countries(self, policy: DataSourcePolicy | None = None) -> CountryListResponse:
        """Handle GET /countries requests.

        Args:
            policy: Explicit data source policy; chosen adaptively if omitted

        Raises:
            HTTPException: If no source could serve the request
        """
        try:
            countries = await self._fetch.execute(policy)
        except CountryCacheError as e:
            raise _http_error("fetch countries", e) from e
        return _country_list(countries)

    async def search_countries(self, query: str, session: str | None = None) -> CountryListResponse:
        """Handle GET /countries/search requests.

        Args:
            query: Search text
            session: Client session; a newer search of the same session
                supersedes this one. None never supersedes.

        Raises:
            HTTPException: 409 if superseded, or if both the remote search
                and the local fallback failed
        """
        try:
            countries = await self._search.search(query, caller=session)
        except asyncio.CancelledError:
            task = asyncio.current_task()
            if task is None or task.cancelling():
                raise
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT,
                detail="Search superseded by a newer search of the same session",
            ) from None
        except CountryCacheError as e:
            raise _http_error("search countries", e) from e
        return _country_list(countries)

    async def filter_countries(
        self,
        query: str = "",
        sort: SortCriteria | None = None,
    ) -> CountryListResponse:
        """Handle GET /countries/filter requests.

        Filters and sorts the last fetched list in memory, fetching it
        first if nothing was fetched yet.

        Raises:
            HTTPException: If the initial fetch failed
        """
        countries = await self._memory_cache.get()
        if countries is None:
            try:
                countries = await self._fetch.execute()
            except CountryCacheError as e:
                raise _http_error("fetch countries", e) from e

        countries = self._search.filter(query, countries)
        if sort is not None:
            countries = self._search.sort(countries, sort)
        return _country_list(countries)

    async def update_cache(self, request: UpdateCountriesRequest) -> CountryListResponse:
        """Handle PUT /countries/cache requests.

        Raises:
            HTTPException: If the local store could not be written
        """
        countries = [item.to_entity() for item in request.countries]
        try:
            await self._repository.update_local_storage(countries)
        except CountryCacheError as e:
            raise _http_error("update local storage", e) from e
        await self._memory_cache.store(countries)
        return _country_list(countries)

    async def clear_cache(self) -> dict:
        """Handle DELETE /countries/cache requests.

        Raises:
            HTTPException: If the local store could not be cleared
        """
        try:
            await self._repository.clear_local_storage()
        except CountryCacheError as e:
            raise _http_error("clear local storage", e) from e
        await self._memory_cache.clear()

        return {
            "success": True,
            "message": "Local storage cleared successfully",
        }

    async def cache_status(self) -> CacheStatusResponse:
        """Handle GET /countries/cache/status requests.

        Raises:
            HTTPException: If the freshness timestamp could not be read
        """
        try:
            last_update = await self._repository.get_last_update_time()
        except CountryCacheError as e:
            raise _http_error("read cache status", e) from e

        return CacheStatusResponse(
            has_valid_local_data=await self._repository.has_valid_local_data(),
            last_update=last_update,
            expiration_seconds=self._repository.cache_policy.expiration_time.total_seconds(),
        )

    async def get_selected(self) -> CountryListResponse:
        """Handle GET /selected requests.

        Raises:
            HTTPException: If the default country could not be looked up
        """
        try:
            countries = await self._selection.current()
        except CountryCacheError as e:
            raise _http_error("load selected countries", e) from e
        return _country_list(countries)

    async def add_selected(self, request: SelectCountryRequest) -> CountryListResponse:
        """Handle POST /selected requests.

        Raises:
            HTTPException: 400 if the selection is full, or a storage error
        """
        try:
            countries = await self._selection.add(request.country.to_entity())
        except SelectionFullError as e:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e
        except CountryCacheError as e:
            raise _http_error("select country", e) from e
        return _country_list(countries)

    async def remove_selected(self, country_id: str) -> CountryListResponse:
        """Handle DELETE /selected/{country_id} requests."""
        try:
            countries = await self._selection.remove(country_id)
        except CountryCacheError as e:
            raise _http_error("remove selected country", e) from e
        return _country_list(countries)

    async def clear_selected(self) -> dict:
        """Handle DELETE /selected requests."""
        try:
            await self._selection.clear()
        except CountryCacheError as e:
            raise _http_error("clear selected countries", e) from e

        return {
            "success": True,
            "message": "Selected countries cleared successfully",
        }

    async def health_check(self) -> HealthCheckResponse:
        """Handle GET /health requests."""
        is_healthy = await self._storage.health_check()

        return HealthCheckResponse(
            status="healthy" if is_healthy else "unhealthy",
            storage_healthy=is_healthy,
        )
