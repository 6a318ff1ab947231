"""Request DTOs for API endpoints."""

from pydantic import BaseModel, Field

from .responses import CountryItem


class UpdateCountriesRequest(BaseModel):
    """Request DTO for replacing the cached country collection."""

    countries: list[CountryItem] = Field(..., description="The new authoritative collection")


class SelectCountryRequest(BaseModel):
    """Request DTO for adding a country to the selection."""

    country: CountryItem = Field(..., description="The country to select")
