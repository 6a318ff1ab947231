"""REST Countries (v3.1) wire models and their domain mapping."""

from pydantic import BaseModel, Field

from country_cache.entities import Coordinates, Country, CountryName, Currency

# Fields requested from the /all endpoint; everything else is ignored
COUNTRY_FIELDS = (
    "name",
    "capital",
    "currencies",
    "languages",
    "flags",
    "latlng",
    "population",
    "area",
    "region",
)


class NameDTO(BaseModel):
    """Country names as returned by the API."""

    common: str
    official: str


class CurrencyDTO(BaseModel):
    """A currency entry (keyed by ISO code in the parent mapping)."""

    name: str
    symbol: str = ""


class FlagsDTO(BaseModel):
    """Flag image locations."""

    png: str = ""
    svg: str = ""


class CountryDTO(BaseModel):
    """A country as returned by the REST Countries API."""

    name: NameDTO
    capital: list[str] | None = None
    currencies: dict[str, CurrencyDTO] | None = None
    languages: dict[str, str] | None = None
    flags: FlagsDTO = Field(default_factory=FlagsDTO)
    latlng: list[float] | None = None
    population: int = 0
    area: float | None = None
    region: str = ""

    def to_entity(self) -> Country:
        """Map this DTO to the Country domain entity.

        Only the first capital and the first currency are kept.

        Returns:
            The domain entity, identified by the common name
        """
        currency = None
        if self.currencies:
            first = next(iter(self.currencies.values()))
            currency = Currency(name=first.name, symbol=first.symbol)

        coordinates = None
        if self.latlng and len(self.latlng) >= 2:
            coordinates = Coordinates(latitude=self.latlng[0], longitude=self.latlng[1])

        return Country(
            id=self.name.common,
            name=CountryName(common=self.name.common, official=self.name.official),
            capital=self.capital[0] if self.capital else None,
            currency=currency,
            languages=list(self.languages.values()) if self.languages else [],
            flag_url=self.flags.png or None,
            coordinates=coordinates,
            population=self.population,
            area=self.area,
            region=self.region,
        )
