"""In-memory country list cache."""

import asyncio

from country_cache.entities import Country


class CountriesMemoryCache:
    """Single-owner cell holding the last fetched country list.

    Every access goes through one asyncio lock, so no two mutations
    interleave. The cell is empty until the first ``store``.
    """

    def __init__(self) -> None:
        self._countries: list[Country] | None = None
        self._lock = asyncio.Lock()

    async def get(self) -> list[Country] | None:
        """Get a copy of the cached list, or None if empty."""
        async with self._lock:
            return None if self._countries is None else list(self._countries)

    async def store(self, countries: list[Country]) -> None:
        """Replace the cached list."""
        async with self._lock:
            self._countries = list(countries)

    async def clear(self) -> None:
        """Empty the cell."""
        async with self._lock:
            self._countries = None
