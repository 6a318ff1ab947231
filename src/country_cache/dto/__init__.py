"""Data Transfer Objects for wire and API contracts.

These Pydantic models define external contracts: the REST Countries
response shape consumed by the remote source, and the request/response
models of the HTTP API.

Internal domain logic should use entities from the entities package.
"""

from .country import CountryDTO, CurrencyDTO, FlagsDTO, NameDTO
from .requests import SelectCountryRequest, UpdateCountriesRequest
from .responses import (
    CacheStatusResponse,
    CountryItem,
    CountryListResponse,
    HealthCheckResponse,
)

__all__ = [
    "CountryDTO",
    "CurrencyDTO",
    "FlagsDTO",
    "NameDTO",
    "SelectCountryRequest",
    "UpdateCountriesRequest",
    "CountryItem",
    "CountryListResponse",
    "CacheStatusResponse",
    "HealthCheckResponse",
]
