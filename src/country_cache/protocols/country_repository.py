"""Country repository protocol.

This is the contract the services depend on. Every method raises only
errors from ``country_cache.errors``.
"""

from typing import Protocol, runtime_checkable

from country_cache.entities import Country
from country_cache.policies import DataSourcePolicy


@runtime_checkable
class CountryRepository(Protocol):
    """Protocol for policy-driven country repositories."""

    async def fetch_all(self, policy: DataSourcePolicy = DataSourcePolicy.default()) -> list[Country]:
        """Fetch all countries using the given data source policy.

        Args:
            policy: Determines which sources are consulted and in what order

        Returns:
            Countries with unique, non-empty identifiers
        """
        ...

    async def search(self, query: str) -> list[Country]:
        """Search countries, remotely first and locally on failure."""
        ...

    async def update_local_storage(self, countries: list[Country]) -> None:
        """Replace the local collection and mark it fresh.

        Raises:
            StorageFailure: If the store could not be written
        """
        ...

    async def clear_local_storage(self) -> None:
        """Remove the local collection and its freshness timestamp.

        Raises:
            StorageFailure: If the store could not be written
        """
        ...

    async def has_valid_local_data(self) -> bool:
        """Check if the local collection exists and is still fresh."""
        ...

    async def fetch_selected(self) -> list[Country]:
        """Load the selected countries."""
        ...

    async def save_selected(self, countries: list[Country]) -> None:
        """Replace the selected countries."""
        ...

    async def clear_selected(self) -> None:
        """Remove the selected countries."""
        ...
