"""Country selection rules.

Owns the in-memory list of selected countries and enforces the rules the
store does not: the size bound, no duplicates, and the named default
country when nothing is selected.
"""

import asyncio
import logging

from country_cache.config import settings
from country_cache.entities import Country
from country_cache.errors import CountryCacheError

from .search_countries import SearchCountriesService
from .selected_countries import SelectedCountriesService

logger = logging.getLogger(__name__)


class SelectionFullError(ValueError):
    """Raised when adding to a selection that already holds the maximum."""


class CountrySelectionService:
    """Bounded, ordered selection of countries, persisted on every change.

    Example:
        ```python
        selection = CountrySelectionService(
            selected=SelectedCountriesService(repository),
            search=SearchCountriesService(repository),
        )
        countries = await selection.load_initial()
        await selection.add(country)
        await selection.remove("France")
        ```
    """

    def __init__(
        self,
        selected: SelectedCountriesService,
        search: SearchCountriesService,
        max_countries: int | None = None,
        default_country: str | None = None,
    ) -> None:
        """Initialize the selection service.

        Args:
            selected: Persists the selection (required).
            search: Looks up the default country with standalone searches (required).
            max_countries: Selection bound. Defaults to settings.
            default_country: Common name selected when nothing is. Defaults to settings.

        Raises:
            ValueError: If max_countries is less than 1
        """
        self._selected = selected
        self._search = search
        self._max_countries = settings.max_selected_countries if max_countries is None else max_countries
        self._default_country = settings.default_country if default_country is None else default_country
        if self._max_countries < 1:
            raise ValueError(f"max_countries must be at least 1, got {self._max_countries}")
        self._countries: list[Country] = []
        self._loaded = False
        self._lock = asyncio.Lock()

    async def load_initial(self) -> list[Country]:
        """Load the saved selection, falling back to the default country.

        An unreadable saved selection is treated as empty.

        Returns:
            The current selection

        Raises:
            CountryCacheError: If the default country lookup or save fails
        """
        async with self._lock:
            await self._load_locked()
            return list(self._countries)

    async def add(self, country: Country) -> list[Country]:
        """Append a country to the selection and persist it.

        A country that is already selected is ignored.

        Returns:
            The current selection

        Raises:
            SelectionFullError: If the selection already holds the maximum
            StorageFailure: If the selection could not be saved
        """
        async with self._lock:
            await self._ensure_loaded_locked()
            if country in self._countries:
                return list(self._countries)
            if len(self._countries) >= self._max_countries:
                raise SelectionFullError(
                    f"At most {self._max_countries} countries can be selected"
                )

            await self._persist([*self._countries, country])
            return list(self._countries)

    async def remove(self, country_id: str) -> list[Country]:
        """Remove a country from the selection and persist the change.

        Removing the last country clears the stored selection.

        Returns:
            The current selection

        Raises:
            StorageFailure: If the selection could not be saved
        """
        async with self._lock:
            await self._ensure_loaded_locked()
            remaining = [country for country in self._countries if country.id != country_id]
            if len(remaining) == len(self._countries):
                return list(self._countries)

            if remaining:
                await self._persist(remaining)
            else:
                await self._selected.clear_selected_countries()
                self._countries = []
            return list(self._countries)

    async def current(self) -> list[Country]:
        """Get the selection, loading it on first use."""
        async with self._lock:
            await self._ensure_loaded_locked()
            return list(self._countries)

    async def clear(self) -> None:
        """Empty the selection and remove it from storage.

        Raises:
            StorageFailure: If the selection could not be removed
        """
        async with self._lock:
            await self._selected.clear_selected_countries()
            self._countries = []
            self._loaded = True

    @property
    def countries(self) -> list[Country]:
        """Get a copy of the current selection."""
        return list(self._countries)

    @property
    def max_countries(self) -> int:
        """Get the selection bound."""
        return self._max_countries

    async def _ensure_loaded_locked(self) -> None:
        if not self._loaded:
            await self._load_locked()

    async def _load_locked(self) -> None:
        # Caller holds self._lock
        try:
            saved = await self._selected.fetch_selected_countries()
        except CountryCacheError as e:
            logger.warning("Could not read saved selection: %s", e)
            saved = []

        self._countries = saved[: self._max_countries]
        if not self._countries:
            await self._select_default_country()
        self._loaded = True

    async def _persist(self, countries: list[Country]) -> None:
        # Only commit the new list once it is saved
        await self._selected.save_selected_countries(countries)
        self._countries = countries

    async def _select_default_country(self) -> None:
        wanted = self._default_country.lower()
        results = await self._search.search(wanted)
        match = next((country for country in results if country.name.common.lower() == wanted), None)
        if match is None:
            logger.warning("Default country %r not found", self._default_country)
            return
        await self._persist([match])
