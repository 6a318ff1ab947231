"""Repository layer for data access.

This layer abstracts external dependencies (REST API, Redis) behind
protocol-based interfaces. This enables:
- Easy swapping of implementations (Redis → in-memory, REST → fixture, etc.)
- Unit testing with fake implementations
- Clear separation of concerns

The repositories are protocol-based (structural typing), not inheritance-based.
Any class implementing the required methods will satisfy the protocol.
"""

from country_cache.protocols import (
    CountryRepository,
    LocalCountrySource,
    PersistentStorage,
    RemoteCountrySource,
)

from .country_repository import TieredCountryRepository
from .in_memory_storage import InMemoryStorage
from .redis_storage import RedisStorage
from .rest_countries_source import RestCountriesSource
from .stored_country_source import StoredCountrySource

__all__ = [
    "CountryRepository",
    "LocalCountrySource",
    "PersistentStorage",
    "RemoteCountrySource",
    "TieredCountryRepository",
    "InMemoryStorage",
    "RedisStorage",
    "RestCountriesSource",
    "StoredCountrySource",
]
