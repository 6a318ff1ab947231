"""Country data source protocols.

The tiered repository depends on these two capability sets only, so
either side can be replaced by a fake in tests.
"""

from datetime import datetime
from typing import Protocol, runtime_checkable

from country_cache.entities import Country


@runtime_checkable
class RemoteCountrySource(Protocol):
    """Protocol for the network-backed source of countries."""

    async def fetch(self) -> list[Country]:
        """Fetch every country.

        Returns:
            All countries known to the remote service

        Raises:
            Transport or decoding errors of the implementation
        """
        ...

    async def search_by_name(self, query: str) -> list[Country]:
        """Search countries by name on the remote service.

        Args:
            query: Name or part of a name

        Returns:
            Matching countries (empty when nothing matches)
        """
        ...


@runtime_checkable
class LocalCountrySource(Protocol):
    """Protocol for the persistent local source of countries.

    Holds two independent collections: the cached country list with its
    freshness timestamp, and the user's selected countries.
    """

    async def fetch(self) -> list[Country]:
        """Load the cached country list.

        Raises:
            NotFound: If no list is stored
        """
        ...

    async def save(self, countries: list[Country]) -> None:
        """Replace the cached list and stamp its update time with now."""
        ...

    async def clear(self) -> None:
        """Remove the cached list together with its update time."""
        ...

    async def exists(self) -> bool:
        """Check whether a cached list is stored."""
        ...

    async def get_last_update_time(self) -> datetime | None:
        """Get when the cached list was last saved, if ever."""
        ...

    async def fetch_selected(self) -> list[Country]:
        """Load the selected countries (empty when none are saved)."""
        ...

    async def save_selected(self, countries: list[Country]) -> None:
        """Replace the selected countries."""
        ...

    async def clear_selected(self) -> None:
        """Remove the selected countries."""
        ...
