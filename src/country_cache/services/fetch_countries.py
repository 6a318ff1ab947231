"""Fetch-all-countries use case."""

import logging

from country_cache.entities import Country
from country_cache.errors import transform_error
from country_cache.policies import DataSourcePolicy
from country_cache.protocols import CountryRepository

from .memory_cache import CountriesMemoryCache

logger = logging.getLogger(__name__)


class FetchCountriesService:
    """Fetches all countries, choosing a data source policy adaptively.

    Without an explicit policy, local data is preferred while it is valid
    (LOCAL_WITH_REMOTE_REFRESH); otherwise the remote source is tried first
    (REMOTE_WITH_LOCAL_FALLBACK).
    """

    def __init__(
        self,
        repository: CountryRepository,
        memory_cache: CountriesMemoryCache | None = None,
    ) -> None:
        """Initialize the service.

        Args:
            repository: Country repository (required).
            memory_cache: Receives every successfully fetched list. Optional.
        """
        self._repository = repository
        self._memory_cache = memory_cache

    async def execute(self, policy: DataSourcePolicy | None = None) -> list[Country]:
        """Fetch all countries.

        Args:
            policy: Explicit policy. If None, one is picked from local validity.

        Returns:
            The fetched countries

        Raises:
            CountryCacheError: If no source could serve the request
        """
        effective = policy or await self.determine_policy()
        try:
            countries = await self._repository.fetch_all(effective)
        except Exception as e:
            raise transform_error(e)

        if self._memory_cache is not None:
            await self._memory_cache.store(countries)
        return countries

    async def determine_policy(self) -> DataSourcePolicy:
        """Pick the policy to use when the caller gives none."""
        if await self._repository.has_valid_local_data():
            return DataSourcePolicy.LOCAL_WITH_REMOTE_REFRESH
        logger.debug("No valid local data, preferring remote source")
        return DataSourcePolicy.REMOTE_WITH_LOCAL_FALLBACK
