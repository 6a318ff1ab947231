"""Selected countries use case."""

from country_cache.entities import Country
from country_cache.protocols import CountryRepository


class SelectedCountriesService:
    """Reads and writes the user's selected countries.

    The selection is stored apart from the cached country list and has no
    freshness: it is always the last saved value, or empty.
    """

    def __init__(self, repository: CountryRepository) -> None:
        self._repository = repository

    async def fetch_selected_countries(self) -> list[Country]:
        return await self._repository.fetch_selected()

    async def save_selected_countries(self, countries: list[Country]) -> None:
        await self._repository.save_selected(countries)

    async def clear_selected_countries(self) -> None:
        await self._repository.clear_selected()
