"""Tiered country repository.

Orchestrates the remote and local country sources according to a
DataSourcePolicy, keeps the local copy fresh as a side effect of remote
reads, and translates every failure into the country cache taxonomy.
"""

import logging
from collections.abc import Callable
from datetime import datetime, timezone

from country_cache.entities import Country, filter_countries
from country_cache.errors import (
    CountryCacheError,
    NetworkFailure,
    StorageFailure,
    transform_error,
)
from country_cache.policies import CachePolicy, DataSourcePolicy
from country_cache.protocols import LocalCountrySource, RemoteCountrySource

from .stored_country_source import utc_now

logger = logging.getLogger(__name__)


def _as_storage_failure(error: Exception) -> StorageFailure:
    if isinstance(error, StorageFailure):
        return error
    failure = StorageFailure(transform_error(error).message)
    failure.__cause__ = error
    return failure


class TieredCountryRepository:
    """Policy-driven read-through / write-through country repository.

    This class satisfies the CountryRepository protocol and depends only on
    the source PROTOCOLS:
    - RemoteCountrySource: REST API, fixture, fake...
    - LocalCountrySource: Redis-backed store, in-memory store, fake...

    Policies:
    - REMOTE_ONLY: remote, written through to local; no fallback
    - LOCAL_ONLY: local as stored, no freshness check
    - REMOTE_WITH_LOCAL_FALLBACK: remote, then local on any remote failure
    - LOCAL_WITH_REMOTE_REFRESH: local while fresh, else remote with fallback

    When both sources fail, the local failure is raised and the discarded
    remote failure is attached to it as ``remote_error``.

    Example:
        ```python
        repository = TieredCountryRepository(
            remote=RestCountriesSource.create(),
            local=StoredCountrySource(storage=RedisStorage.create()),
        )
        countries = await repository.fetch_all(DataSourcePolicy.REMOTE_WITH_LOCAL_FALLBACK)
        ```
    """

    def __init__(
        self,
        remote: RemoteCountrySource,
        local: LocalCountrySource,
        cache_policy: CachePolicy | None = None,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        """Initialize the repository.

        Args:
            remote: Network-backed source (required).
            local: Persistent source (required).
            cache_policy: Freshness policy. Defaults to a CachePolicy from settings.
            clock: Returns the current instant for freshness checks.
        """
        self._remote = remote
        self._local = local
        self._cache_policy = cache_policy or CachePolicy()
        self._clock = clock

    @classmethod
    def create(
        cls,
        remote: RemoteCountrySource,
        local: LocalCountrySource,
        expiration_seconds: float | None = None,
    ) -> "TieredCountryRepository":
        """Factory method to create a repository with a configured window.

        Args:
            remote: Network-backed source (required).
            local: Persistent source (required).
            expiration_seconds: Freshness window. If None, uses settings.

        Returns:
            Configured TieredCountryRepository
        """
        return cls(
            remote=remote,
            local=local,
            cache_policy=CachePolicy(expiration_seconds=expiration_seconds),
        )

    async def fetch_all(
        self,
        policy: DataSourcePolicy = DataSourcePolicy.default(),
    ) -> list[Country]:
        """Fetch all countries using the given data source policy.

        Args:
            policy: Determines which sources are consulted and in what order

        Returns:
            Countries with unique, non-empty identifiers

        Raises:
            CountryCacheError: The failure of the last source consulted
        """
        policy = DataSourcePolicy(policy)
        logger.debug("Fetching countries with policy %s", policy.value)

        if policy is DataSourcePolicy.REMOTE_ONLY:
            return await self._fetch_remote()
        if policy is DataSourcePolicy.LOCAL_ONLY:
            return await self._fetch_local()
        if policy is DataSourcePolicy.REMOTE_WITH_LOCAL_FALLBACK:
            return await self._fetch_remote_with_local_fallback()

        if await self.has_valid_local_data():
            return await self._fetch_local()
        return await self._fetch_remote_with_local_fallback()

    async def search(self, query: str) -> list[Country]:
        """Search countries by name, remotely first.

        The query is always sent to the remote source. If that fails, the
        full local collection is filtered in memory on name, capital and
        region instead.

        Args:
            query: Search text

        Returns:
            Matching countries

        Raises:
            CountryCacheError: The local failure, when both sources failed
        """
        try:
            return self._normalize(await self._remote.search_by_name(query))
        except Exception as e:
            remote_error = transform_error(e, default=NetworkFailure)
            logger.warning("Remote search for %r failed, searching locally: %s", query, remote_error)

        try:
            countries = await self._fetch_local()
        except CountryCacheError as local_error:
            raise local_error.with_remote_error(remote_error)
        return filter_countries(query, countries)

    async def update_local_storage(self, countries: list[Country]) -> None:
        """Replace the local collection and mark it fresh.

        Args:
            countries: The new authoritative collection

        Raises:
            StorageFailure: If the store could not be written
        """
        try:
            await self._local.save(countries)
        except Exception as e:
            raise _as_storage_failure(e)

    async def clear_local_storage(self) -> None:
        """Remove the local collection together with its freshness timestamp.

        Raises:
            StorageFailure: If the store could not be written
        """
        try:
            await self._local.clear()
        except Exception as e:
            raise _as_storage_failure(e)

    async def has_valid_local_data(self) -> bool:
        """Check if the local collection can be trusted without a remote read.

        True iff a freshness timestamp is recorded, it is within the cache
        policy's window, and the local source reports the collection exists.
        Source errors count as "not valid".

        Returns:
            True if local data exists and is fresh, False otherwise
        """
        try:
            last_update = await self._local.get_last_update_time()
            if last_update is None:
                return False
            if last_update.tzinfo is None:
                last_update = last_update.replace(tzinfo=timezone.utc)
            if not self._cache_policy.is_fresh(last_update, self._clock()):
                return False
            return await self._local.exists()
        except Exception as e:
            logger.warning("Could not check local data validity: %s", transform_error(e))
            return False

    async def get_last_update_time(self) -> datetime | None:
        """Get when the local collection was last saved.

        Raises:
            CountryCacheError: If the timestamp could not be read
        """
        try:
            return await self._local.get_last_update_time()
        except Exception as e:
            raise transform_error(e)

    async def fetch_selected(self) -> list[Country]:
        """Load the selected countries (empty when none are saved).

        Raises:
            CountryCacheError: If the selection could not be read
        """
        try:
            return await self._local.fetch_selected()
        except Exception as e:
            raise transform_error(e)

    async def save_selected(self, countries: list[Country]) -> None:
        """Replace the selected countries.

        Raises:
            StorageFailure: If the store could not be written
        """
        try:
            await self._local.save_selected(countries)
        except Exception as e:
            raise _as_storage_failure(e)

    async def clear_selected(self) -> None:
        """Remove the selected countries.

        Raises:
            StorageFailure: If the store could not be written
        """
        try:
            await self._local.clear_selected()
        except Exception as e:
            raise _as_storage_failure(e)

    @property
    def cache_policy(self) -> CachePolicy:
        """Get the freshness policy."""
        return self._cache_policy

    async def _fetch_remote(self) -> list[Country]:
        try:
            countries = self._normalize(await self._remote.fetch())
        except Exception as e:
            raise transform_error(e, default=NetworkFailure)

        # Write-through is best effort: the fetched countries are returned either way
        try:
            await self._local.save(countries)
        except Exception as e:
            logger.warning("Failed to cache %d countries locally: %s", len(countries), transform_error(e))

        return countries

    async def _fetch_local(self) -> list[Country]:
        try:
            return self._normalize(await self._local.fetch())
        except Exception as e:
            raise transform_error(e)

    async def _fetch_remote_with_local_fallback(self) -> list[Country]:
        try:
            return await self._fetch_remote()
        except CountryCacheError as remote_error:
            logger.warning("Remote fetch failed, falling back to local storage: %s", remote_error)
            try:
                return await self._fetch_local()
            except CountryCacheError as local_error:
                raise local_error.with_remote_error(remote_error)

    @staticmethod
    def _normalize(countries: list[Country]) -> list[Country]:
        """Drop countries with an empty or repeated identifier, keeping the first."""
        seen: set[str] = set()
        unique: list[Country] = []
        for country in countries:
            if not country.id or country.id in seen:
                continue
            seen.add(country.id)
            unique.append(country)

        dropped = len(countries) - len(unique)
        if dropped:
            logger.warning("Dropped %d countries with empty or duplicate identifiers", dropped)
        return unique
