"""Service layer for business logic.

This layer contains the use cases. Services depend on protocols
(interfaces), not concrete implementations, making them testable and
flexible.

Architecture:
    Handler -> Service -> Repository -> Sources
    (HTTP)  -> (Use case) -> (Policy) -> (REST / Redis)

Usage:
    ```python
    from country_cache.services import FetchCountriesService

    fetch = FetchCountriesService(repository=repository)
    countries = await fetch.execute()
    ```
"""

from .country_selection import CountrySelectionService, SelectionFullError
from .fetch_countries import FetchCountriesService
from .memory_cache import CountriesMemoryCache
from .search_countries import SearchCountriesService
from .selected_countries import SelectedCountriesService

__all__ = [
    "CountriesMemoryCache",
    "CountrySelectionService",
    "FetchCountriesService",
    "SearchCountriesService",
    "SelectedCountriesService",
    "SelectionFullError",
]
