"""In-memory filtering and sorting of countries."""

from collections.abc import Callable
from enum import Enum
from typing import Any

from .country import Country


class SortCriteria(str, Enum):
    """Attribute a country list can be sorted by."""

    NAME = "name"
    POPULATION = "population"
    AREA = "area"
    REGION = "region"


# Descending orders negate the key so that sorted() stays stable on ties
_SORT_KEYS: dict[SortCriteria, Callable[[Country], Any]] = {
    SortCriteria.NAME: lambda country: country.name.common,
    SortCriteria.POPULATION: lambda country: -country.population,
    SortCriteria.AREA: lambda country: -(country.area or 0.0),
    SortCriteria.REGION: lambda country: country.region,
}


def filter_countries(query: str, countries: list[Country]) -> list[Country]:
    """Keep the countries matching the query.

    An empty query returns the input list itself.

    Args:
        query: Case-insensitive search text
        countries: Countries to search in

    Returns:
        Matching countries, in input order
    """
    if not query:
        return countries
    return [country for country in countries if country.matches(query)]


def sort_countries(countries: list[Country], criteria: SortCriteria) -> list[Country]:
    """Return the countries sorted by the given criteria.

    Name and region sort ascending, population and area descending with a
    missing area counting as zero. Ties keep their input order.

    Args:
        countries: Countries to sort
        criteria: Attribute to sort by

    Returns:
        A new sorted list
    """
    return sorted(countries, key=_SORT_KEYS[SortCriteria(criteria)])
