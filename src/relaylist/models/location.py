"""
Geographic annotation attached to relays at runtime.

A [Location][relaylist.models.location.Location] is never part of the relay
list wire format. It is attached after deserialization, either by an external
geo-lookup component or from the country and city a relay is listed under
(see [RelayList.with_locations()][relaylist.catalog.relay_list.RelayList.with_locations]).
"""

from __future__ import annotations

from dataclasses import dataclass

from ._validation import validate_coordinate, validate_str_no_null, validate_str_not_empty


@dataclass(frozen=True, slots=True)
class Location:
    """Immutable geographic position of a relay.

    Attributes:
        country: Country display name.
        country_code: Country identifier (e.g. ``se``).
        city: City display name.
        city_code: City identifier, unique within the country (e.g. ``got``).
        latitude: Degrees north, ``-90..90``.
        longitude: Degrees east, ``-180..180``.

    Raises:
        TypeError: If a field has the wrong type.
        ValueError: If a code is empty or a coordinate is out of range.
    """

    country: str
    country_code: str
    city: str
    city_code: str
    latitude: float
    longitude: float

    def __post_init__(self) -> None:
        validate_str_no_null(self.country, "country")
        validate_str_not_empty(self.country_code, "country_code")
        validate_str_no_null(self.city, "city")
        validate_str_not_empty(self.city_code, "city_code")
        validate_coordinate(self.latitude, "latitude", 90.0)
        validate_coordinate(self.longitude, "longitude", 180.0)

    def __str__(self) -> str:
        return f"{self.city}, {self.country} ({self.country_code}-{self.city_code})"
