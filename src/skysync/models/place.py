"""Nominatim geocoding models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

# Address keys tried in order when deriving a short place name.
PLACE_KEYS = ("city", "town", "village", "suburb", "county", "state")


class Place(BaseModel):
    """A forward geocoding match. Nominatim sends coordinates as strings."""

    model_config = ConfigDict(frozen=True)

    place_id: int | None = None
    lat: float
    lon: float
    display_name: str = ""
    name: str | None = None
    type: str | None = None
    importance: float | None = None

    @property
    def short_name(self) -> str:
        """First two comma-separated parts of the display name."""
        return ",".join(self.display_name.split(",")[:2])


class Address(BaseModel):
    """Address breakdown returned with ``addressdetails=1``."""

    model_config = ConfigDict(frozen=True)

    city: str | None = None
    town: str | None = None
    village: str | None = None
    suburb: str | None = None
    county: str | None = None
    state: str | None = None
    country: str | None = None
    country_code: str | None = None

    def place_name(self) -> str | None:
        """Return the most specific populated place name, or None."""
        for key in PLACE_KEYS:
            value = getattr(self, key)
            if value:
                return value
        return None


class ReversePlace(BaseModel):
    """A reverse geocoding result.

    Nominatim answers unresolvable points with ``{"error": "..."}`` and a 200
    status, so every field is optional.
    """

    model_config = ConfigDict(frozen=True)

    lat: float | None = None
    lon: float | None = None
    display_name: str | None = None
    address: Address = Address()
    error: str | None = None
