"""Domain entities for internal representation.

These are pure frozen dataclasses used by services and repositories.
They are NOT used for wire or API contracts - use the models from the
dto package for that.

The filtering and sorting helpers here are pure functions over
already-fetched countries.
"""

from .country import Coordinates, Country, CountryName, Currency
from .ordering import SortCriteria, filter_countries, sort_countries

__all__ = [
    "Coordinates",
    "Country",
    "CountryName",
    "Currency",
    "SortCriteria",
    "filter_countries",
    "sort_countries",
]
