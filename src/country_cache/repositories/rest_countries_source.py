"""REST Countries remote source.

Uses the public REST Countries API (v3.1) to fetch and search countries.

Endpoints used:
- GET /all?fields=...     every country, restricted to the mapped fields
- GET /name/{query}       countries whose name contains the query

Transport and decoding errors are raised as-is; the repository translates
them into the country cache error taxonomy.
"""

import logging
from urllib.parse import quote

import httpx
from pydantic import TypeAdapter

from country_cache.config import settings
from country_cache.dto.country import COUNTRY_FIELDS, CountryDTO
from country_cache.entities import Country

logger = logging.getLogger(__name__)

_COUNTRY_DTO_LIST = TypeAdapter(list[CountryDTO])


class RestCountriesSource:
    """REST Countries implementation of RemoteCountrySource.

    This class satisfies the RemoteCountrySource protocol through structural
    typing - no explicit inheritance needed.

    Example:
        ```python
        remote = RestCountriesSource.create()
        countries = await remote.fetch()
        egypt = await remote.search_by_name("egypt")
        await remote.close()
        ```
    """

    DEFAULT_HEADERS = {
        "Content-Type": "application/json",
        "Accept": "application/json",
    }

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        """Initialize the REST Countries source.

        Args:
            base_url: API base URL. Defaults to settings.countries_api_url.
            timeout: Request timeout in seconds. Defaults to settings.
            client: Preconfigured HTTP client. If None, one is created lazily.
        """
        self._base_url = (base_url or settings.countries_api_url).rstrip("/")
        self._timeout = settings.countries_api_timeout if timeout is None else timeout
        self._client = client

    @classmethod
    def create(
        cls,
        base_url: str | None = None,
        timeout: float | None = None,
    ) -> "RestCountriesSource":
        """Factory method to create RestCountriesSource with defaults.

        Args:
            base_url: API base URL. If None, uses settings.
            timeout: Request timeout in seconds. If None, uses settings.

        Returns:
            Configured RestCountriesSource
        """
        return cls(base_url=base_url, timeout=timeout)

    @property
    def client(self) -> httpx.AsyncClient:
        """Lazy-load the async HTTP client.

        Returns:
            The httpx.AsyncClient instance
        """
        if self._client is None:
            self._client = httpx.AsyncClient(
                timeout=self._timeout,
                headers=self.DEFAULT_HEADERS,
                limits=httpx.Limits(max_connections=20, max_keepalive_connections=5),
            )
        return self._client

    async def fetch(self) -> list[Country]:
        """Fetch every country.

        Returns:
            All countries returned by the API

        Raises:
            httpx.HTTPError: If the request fails or returns an error status
            pydantic.ValidationError: If the payload has an unexpected shape
        """
        url = f"{self._base_url}/all"
        response = await self.client.get(url, params={"fields": ",".join(COUNTRY_FIELDS)})
        response.raise_for_status()
        countries = self._decode(response)
        logger.debug("Fetched %d countries from %s", len(countries), url)
        return countries

    async def search_by_name(self, query: str) -> list[Country]:
        """Search countries by name.

        Args:
            query: Name or part of a name

        Returns:
            Matching countries; empty when the API reports no match (HTTP 404)

        Raises:
            httpx.HTTPError: If the request fails or returns another error status
            pydantic.ValidationError: If the payload has an unexpected shape
        """
        url = f"{self._base_url}/name/{quote(query, safe='')}"
        response = await self.client.get(url)
        if response.status_code == httpx.codes.NOT_FOUND:
            return []
        response.raise_for_status()
        return self._decode(response)

    async def close(self) -> None:
        """Close the async HTTP client.

        Should be called when shutting down the application.
        """
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    @staticmethod
    def _decode(response: httpx.Response) -> list[Country]:
        return [dto.to_entity() for dto in _COUNTRY_DTO_LIST.validate_json(response.content)]
