"""Country Cache - Country information with policy-driven tiered caching.

This package provides a layered architecture around one core: a repository
that decides, per read, whether to consult the remote REST source, the
local persistent store, or both, and keeps them consistent.

Layers:
    - protocols: Interface contracts (sources, storage, repository)
    - policies: Freshness and data source policies
    - repositories: Data access implementations and the tiered repository
    - services: Use cases (fetch, search, selection)
    - handlers: HTTP endpoint handlers
    - dto: Data transfer objects (wire and API contracts)
    - entities: Domain models (internal)

Usage:
    ```python
    from country_cache import (
        DataSourcePolicy,
        InMemoryStorage,
        RestCountriesSource,
        StoredCountrySource,
        TieredCountryRepository,
    )

    repository = TieredCountryRepository(
        remote=RestCountriesSource.create(),
        local=StoredCountrySource(storage=InMemoryStorage()),
    )
    countries = await repository.fetch_all(DataSourcePolicy.REMOTE_WITH_LOCAL_FALLBACK)
    ```

For HTTP API:
    ```python
    from country_cache.api.app import app
    ```
"""

from country_cache.config import get_redis_client, settings
from country_cache.entities import (
    Coordinates,
    Country,
    CountryName,
    Currency,
    SortCriteria,
    filter_countries,
    sort_countries,
)
from country_cache.errors import (
    CountryCacheError,
    InvalidData,
    NetworkFailure,
    NotFound,
    RepositoryFailure,
    StorageFailure,
    transform_error,
)
from country_cache.handlers import CountryHandler
from country_cache.policies import CachePolicy, DataSourcePolicy
from country_cache.protocols import (
    CountryRepository,
    LocalCountrySource,
    PersistentStorage,
    RemoteCountrySource,
)
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

__all__ = [
    # Configuration
    "settings",
    "get_redis_client",
    # Errors
    "CountryCacheError",
    "InvalidData",
    "NetworkFailure",
    "NotFound",
    "RepositoryFailure",
    "StorageFailure",
    "transform_error",
    # Policies
    "CachePolicy",
    "DataSourcePolicy",
    # Protocols (interfaces)
    "CountryRepository",
    "LocalCountrySource",
    "PersistentStorage",
    "RemoteCountrySource",
    # Repositories (data access)
    "InMemoryStorage",
    "RedisStorage",
    "RestCountriesSource",
    "StoredCountrySource",
    "TieredCountryRepository",
    # Services (use cases)
    "CountriesMemoryCache",
    "CountrySelectionService",
    "FetchCountriesService",
    "SearchCountriesService",
    "SelectedCountriesService",
    # Handlers (HTTP)
    "CountryHandler",
    # Entities (domain models)
    "Coordinates",
    "Country",
    "CountryName",
    "Currency",
    "SortCriteria",
    "filter_countries",
    "sort_countries",
]
