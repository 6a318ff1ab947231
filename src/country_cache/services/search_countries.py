"""Search and sort use case."""

import asyncio
import logging
from collections.abc import Hashable

from country_cache.entities import Country, SortCriteria, filter_countries, sort_countries
from country_cache.protocols import CountryRepository

logger = logging.getLogger(__name__)


class SearchCountriesService:
    """Searches countries remotely and filters or sorts them in memory.

    Each caller key has at most one repository search in flight: a new
    search for the same caller cancels that caller's previous one, whose
    awaiter then receives ``asyncio.CancelledError``. Searches of other
    callers, and searches without a caller key, are never cancelled.
    """

    def __init__(self, repository: CountryRepository) -> None:
        self._repository = repository
        self._search_tasks: dict[Hashable, asyncio.Task[list[Country]]] = {}

    async def search(self, query: str, caller: Hashable | None = None) -> list[Country]:
        """Search countries through the repository.

        Args:
            query: Search text, always sent to the remote source first
            caller: Identifies whose searches supersede each other (e.g. a
                client session). None runs a standalone search.

        Returns:
            Matching countries
        """
        if caller is None:
            return await self._repository.search(query)

        previous = self._search_tasks.get(caller)
        if previous is not None and not previous.done():
            logger.debug("Cancelling superseded search of %r", caller)
            previous.cancel()

        task = asyncio.create_task(self._repository.search(query))
        self._search_tasks[caller] = task
        try:
            return await task
        finally:
            if self._search_tasks.get(caller) is task:
                del self._search_tasks[caller]

    def filter(self, query: str, countries: list[Country]) -> list[Country]:
        """Filter already-fetched countries; an empty query keeps them all."""
        return filter_countries(query, countries)

    def sort(self, countries: list[Country], criteria: SortCriteria) -> list[Country]:
        """Stable sort of already-fetched countries."""
        return sort_countries(countries, criteria)
