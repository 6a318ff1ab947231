"""Country domain entity."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class CountryName:
    """Common and official display names of a country."""

    common: str
    official: str


@dataclass(frozen=True)
class Currency:
    """The primary currency of a country."""

    name: str
    symbol: str


@dataclass(frozen=True)
class Coordinates:
    """Geographic center of a country."""

    latitude: float
    longitude: float


@dataclass(frozen=True, eq=False)
class Country:
    """Domain entity for a country.

    Equality and hashing use ``id`` only, so two records of the same
    country compare equal even if their attributes differ.

    Attributes:
        id: Stable identifier, the common name of the country
        name: Common and official names
        capital: Capital city, if the country has one
        currency: Primary currency, if known
        languages: Names of the spoken languages
        flag_url: Location of the flag image, if known
        coordinates: Geographic center, if known
        population: Number of inhabitants
        area: Surface in square kilometres, if known
        region: Continent-level region (e.g. "Europe")
    """

    id: str
    name: CountryName
    capital: str | None = None
    currency: Currency | None = None
    languages: list[str] = field(default_factory=list)
    flag_url: str | None = None
    coordinates: Coordinates | None = None
    population: int = 0
    area: float | None = None
    region: str = ""

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Country):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    @property
    def formatted_population(self) -> str:
        """Population with thousands separators (e.g. "1,234,567")."""
        return f"{self.population:,}"

    @property
    def formatted_area(self) -> str | None:
        """Area with thousands separators and at most two decimals, in km²."""
        if self.area is None:
            return None
        number = f"{self.area:,.2f}".rstrip("0").rstrip(".")
        return f"{number} km²"

    def matches(self, query: str) -> bool:
        """Check whether the query occurs in any searchable field.

        Matching is a case-insensitive substring test against the common
        and official names, the capital and the region.

        Args:
            query: The text to look for

        Returns:
            True if any field contains the query
        """
        needle = query.lower()
        fields = (self.name.common, self.name.official, self.capital or "", self.region)
        return any(needle in value.lower() for value in fields)
