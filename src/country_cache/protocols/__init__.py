"""Protocol interfaces for swappable implementations.

This package contains protocol definitions using structural typing.
Protocols enable:
- Easy swapping of implementations (Redis → in-memory, REST → fixture, etc.)
- Unit testing with fake implementations
- Clear separation of concerns

Usage:
    ```python
    from country_cache.protocols import LocalCountrySource, RemoteCountrySource

    # Type hints work with any implementation
    remote: RemoteCountrySource = RestCountriesSource()
    local: LocalCountrySource = StoredCountrySource(storage=InMemoryStorage())
    ```
"""

from .country_repository import CountryRepository
from .country_source import LocalCountrySource, RemoteCountrySource
from .persistent_storage import PersistentStorage

__all__ = [
    "CountryRepository",
    "LocalCountrySource",
    "PersistentStorage",
    "RemoteCountrySource",
]
