"""Local country source backed by a PersistentStorage.

Countries are serialized to JSON with pydantic. The freshness timestamp
of the cached collection is kept under its own key as an ISO-8601 string.
"""

import logging
from collections.abc import Callable
from datetime import datetime, timezone

from pydantic import TypeAdapter

from country_cache.config import settings
from country_cache.entities import Country
from country_cache.errors import NotFound
from country_cache.protocols import PersistentStorage

logger = logging.getLogger(__name__)

_COUNTRY_LIST = TypeAdapter(list[Country])


def utc_now() -> datetime:
    """Current instant as a timezone-aware UTC datetime."""
    return datetime.now(timezone.utc)


class StoredCountrySource:
    """LocalCountrySource implementation over a key-value store.

    This class satisfies the LocalCountrySource protocol through structural
    typing - no explicit inheritance needed.

    Example:
        ```python
        local = StoredCountrySource(storage=RedisStorage.create())
        await local.save(countries)
        stamped_at = await local.get_last_update_time()
        ```
    """

    def __init__(
        self,
        storage: PersistentStorage,
        countries_key: str | None = None,
        last_update_key: str | None = None,
        selected_key: str | None = None,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        """Initialize the stored country source.

        Args:
            storage: Key-value backend (required).
            countries_key: Key of the cached collection. Defaults to settings.
            last_update_key: Key of the freshness timestamp. Defaults to settings.
            selected_key: Key of the selected countries. Defaults to settings.
            clock: Returns the instant used to stamp saves.
        """
        self._storage = storage
        self._countries_key = countries_key or settings.countries_key
        self._last_update_key = last_update_key or settings.last_update_key
        self._selected_key = selected_key or settings.selected_key
        self._clock = clock

    async def fetch(self) -> list[Country]:
        if not await self.exists():
            raise NotFound("No countries stored locally")
        return await self._load(self._countries_key)

    async def save(self, countries: list[Country]) -> None:
        await self._storage.save(self._countries_key, _COUNTRY_LIST.dump_json(countries))
        stamp = self._clock()
        await self._storage.save(self._last_update_key, stamp.isoformat().encode())
        logger.debug("Stored %d countries at %s", len(countries), stamp.isoformat())

    async def clear(self) -> None:
        await self._storage.remove(self._countries_key, self._last_update_key)

    async def exists(self) -> bool:
        return await self._storage.exists(self._countries_key)

    async def get_last_update_time(self) -> datetime | None:
        try:
            raw = await self._storage.fetch(self._last_update_key)
        except NotFound:
            return None
        return datetime.fromisoformat(raw.decode())

    async def fetch_selected(self) -> list[Country]:
        try:
            return await self._load(self._selected_key)
        except NotFound:
            return []

    async def save_selected(self, countries: list[Country]) -> None:
        await self._storage.save(self._selected_key, _COUNTRY_LIST.dump_json(countries))

    async def clear_selected(self) -> None:
        await self._storage.remove(self._selected_key)

    async def _load(self, key: str) -> list[Country]:
        return _COUNTRY_LIST.validate_json(await self._storage.fetch(key))
