"""Response DTOs for API endpoints."""

from datetime import datetime

from pydantic import BaseModel, Field

from country_cache.entities import Coordinates, Country, CountryName, Currency


class CountryItem(BaseModel):
    """A single country in API payloads."""

    id: str = Field(..., description="Stable identifier (common name)", min_length=1)
    common_name: str = Field(..., description="Common display name")
    official_name: str = Field(..., description="Official display name")
    capital: str | None = Field(None, description="Capital city")
    currency_name: str | None = Field(None, description="Primary currency name")
    currency_symbol: str | None = Field(None, description="Primary currency symbol")
    languages: list[str] = Field(default_factory=list, description="Spoken languages")
    flag_url: str | None = Field(None, description="Flag image location")
    latitude: float | None = Field(None, description="Latitude of the geographic center")
    longitude: float | None = Field(None, description="Longitude of the geographic center")
    population: int = Field(0, description="Number of inhabitants", ge=0)
    area: float | None = Field(None, description="Area in km²", ge=0.0)
    region: str = Field("", description="Continent-level region")

    @classmethod
    def from_entity(cls, country: Country) -> "CountryItem":
        """Build the API item for a domain entity."""
        return cls(
            id=country.id,
            common_name=country.name.common,
            official_name=country.name.official,
            capital=country.capital,
            currency_name=country.currency.name if country.currency else None,
            currency_symbol=country.currency.symbol if country.currency else None,
            languages=list(country.languages),
            flag_url=country.flag_url,
            latitude=country.coordinates.latitude if country.coordinates else None,
            longitude=country.coordinates.longitude if country.coordinates else None,
            population=country.population,
            area=country.area,
            region=country.region,
        )

    def to_entity(self) -> Country:
        """Build the domain entity for this item."""
        currency = None
        if self.currency_name is not None:
            currency = Currency(name=self.currency_name, symbol=self.currency_symbol or "")

        coordinates = None
        if self.latitude is not None and self.longitude is not None:
            coordinates = Coordinates(latitude=self.latitude, longitude=self.longitude)

        return Country(
            id=self.id,
            name=CountryName(common=self.common_name, official=self.official_name),
            capital=self.capital,
            currency=currency,
            languages=list(self.languages),
            flag_url=self.flag_url,
            coordinates=coordinates,
            population=self.population,
            area=self.area,
            region=self.region,
        )


class CountryListResponse(BaseModel):
    """Response DTO for any endpoint returning countries."""

    count: int = Field(..., description="Number of countries returned", ge=0)
    countries: list[CountryItem] = Field(default_factory=list)


class CacheStatusResponse(BaseModel):
    """Response DTO for the local cache status."""

    has_valid_local_data: bool = Field(..., description="Whether local data exists and is fresh")
    last_update: datetime | None = Field(None, description="When the local data was last saved")
    expiration_seconds: float = Field(..., description="Freshness window in seconds", gt=0)


class HealthCheckResponse(BaseModel):
    """Response DTO for health check."""

    status: str = Field(..., description="Health status: 'healthy' or 'unhealthy'")
    storage_healthy: bool = Field(..., description="Whether the persistent store is reachable")
