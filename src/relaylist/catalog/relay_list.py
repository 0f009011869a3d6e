"""
Relay list catalog: country, city and relay hierarchy.

The catalog is delivered by the server as JSON and deserialized whole: either
every part of the payload validates, or
[DeserializationError][relaylist.core.exceptions.DeserializationError] is
raised and no catalog is produced.

Model hierarchy:

```text
RelayList                                Catalog root
+-- countries: list[RelayListCountry]
    +-- name, code
    +-- cities: list[RelayListCity]
        +-- name, code, latitude, longitude
        +-- relays: list[Relay]
            +-- hostname, ipv4_addr_in, include_in_country, weight
            +-- tunnels: RelayTunnels    (omitted from output when empty)
            +-- bridges: RelayBridges    (omitted from output when empty)
            +-- location: Location       (runtime only, never serialized)
```

Note:
    Serialization is ``to_dict()`` / ``to_json()``. For any catalog produced
    by deserialization, ``RelayList.from_dict(catalog.to_dict()) == catalog``
    holds, with ``location`` absent on both sides.

See Also:
    [relaylist.catalog.tunnels][relaylist.catalog.tunnels]: Tunnel and bridge
        descriptor models.
    [RelayListStore][relaylist.catalog.store.RelayListStore]: Holder that
        swaps whole catalog snapshots.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterator
from typing import Annotated, Any, Self

from pydantic import (
    Field,
    SerializerFunctionWrapHandler,
    StrictBool,
    StrictFloat,
    ValidationError,
    model_serializer,
    model_validator,
)

from relaylist.core.exceptions import DeserializationError
from relaylist.models.endpoint import OpenVpnEndpoint
from relaylist.models.location import Location
from relaylist.models.proxy import ShadowsocksProxySettings

from .base import BaseData, Ipv4Addr, NoNullStr, NonEmptyStr, Weight
from .tunnels import RelayBridges, RelayTunnels


logger = logging.getLogger("relaylist.catalog")


class Relay(BaseData):
    """A single relay server and the tunnels and bridges it offers.

    Attributes:
        hostname: Unique, stable relay identifier.
        ipv4_addr_in: Public IPv4 address clients connect to.
        include_in_country: Whether the relay counts toward its country's
            relay set during selection.
        weight: Non-negative selection weight, interpreted by the selector.
        tunnels: Tunnel descriptors; empty when absent from the payload.
        bridges: Bridge descriptors; empty when absent from the payload.
        location: Runtime-only geographic annotation. Always ``None`` after
            deserialization; attach one with ``with_location()``.

    Note:
        ``location`` is dropped from any input (payload or keyword
        arguments) and excluded from every dump. A ``location`` key in a
        payload is ignored rather than rejected. Every dump (``to_dict()``,
        ``model_dump()``, ``model_dump_json()``) leaves out ``tunnels`` and
        ``bridges`` when they hold no descriptor.
    """

    hostname: NonEmptyStr
    ipv4_addr_in: Ipv4Addr
    include_in_country: StrictBool
    weight: Weight
    tunnels: RelayTunnels = Field(default_factory=RelayTunnels)
    bridges: RelayBridges = Field(default_factory=RelayBridges)
    location: Location | None = Field(default=None, exclude=True)

    @model_validator(mode="before")
    @classmethod
    def _drop_location(cls, data: Any) -> Any:
        if isinstance(data, dict) and "location" in data:
            return {k: v for k, v in data.items() if k != "location"}
        return data

    def with_location(self, location: Location | None) -> Self:
        """Return a copy of this relay annotated with *location*.

        The copy owns its own tunnel and bridge containers, so calling
        ``clear()`` on it leaves this relay untouched.
        """
        return self.model_copy(update={"location": location}, deep=True)

    def openvpn_endpoints(self) -> list[OpenVpnEndpoint]:
        """OpenVPN endpoints of every OpenVPN tunnel at ``ipv4_addr_in``."""
        return [data.to_endpoint(self.ipv4_addr_in) for data in self.tunnels.openvpn]

    def shadowsocks_proxy_settings(self) -> list[ShadowsocksProxySettings]:
        """Proxy settings of every Shadowsocks bridge at ``ipv4_addr_in``."""
        return [data.to_proxy_settings(self.ipv4_addr_in) for data in self.bridges.shadowsocks]

    @model_serializer(mode="wrap")
    def _omit_empty_containers(self, handler: SerializerFunctionWrapHandler) -> dict[str, Any]:
        result = handler(self)
        if self.tunnels.is_empty():
            result.pop("tunnels", None)
        if self.bridges.is_empty():
            result.pop("bridges", None)
        return result


class RelayListCity(BaseData):
    """A city and the relays located in it."""

    name: NoNullStr
    code: NonEmptyStr
    latitude: Annotated[StrictFloat, Field(ge=-90.0, le=90.0)]
    longitude: Annotated[StrictFloat, Field(ge=-180.0, le=180.0)]
    relays: list[Relay]


class RelayListCountry(BaseData):
    """A country and its cities. ``code`` is the identity; ``name`` is display only."""

    name: NoNullStr
    code: NonEmptyStr
    cities: list[RelayListCity]

    @model_validator(mode="after")
    def _unique_city_codes(self) -> Self:
        seen: set[str] = set()
        for city in self.cities:
            if city.code in seen:
                raise ValueError(f"duplicate city code {city.code!r} in country {self.code!r}")
            seen.add(city.code)
        return self


class RelayList(BaseData):
    """Root of the relay catalog.

    Built whole from a server payload with ``from_json()`` / ``from_dict()``,
    or as ``RelayList.empty()`` before the first successful fetch. The
    catalog is never mutated in place; a refresh replaces it wholesale.

    Raises:
        DeserializationError: From ``from_dict()`` / ``from_json()`` when
            the payload violates the wire contract.

    Examples:
        ```python
        relay_list = RelayList.from_json(payload)
        relay = relay_list.find_relay("se-got-wg-001")
        relay.openvpn_endpoints()

        RelayList.empty().to_dict()   # {'countries': []}
        ```
    """

    countries: list[RelayListCountry]

    @model_validator(mode="after")
    def _unique_identifiers(self) -> Self:
        country_codes: set[str] = set()
        hostnames: set[str] = set()
        for country in self.countries:
            if country.code in country_codes:
                raise ValueError(f"duplicate country code {country.code!r}")
            country_codes.add(country.code)
            for city in country.cities:
                for relay in city.relays:
                    if relay.hostname in hostnames:
                        raise ValueError(f"duplicate relay hostname {relay.hostname!r}")
                    hostnames.add(relay.hostname)
        return self

    # -------------------------------------------------------------------------
    # Construction
    # -------------------------------------------------------------------------

    @classmethod
    def empty(cls) -> Self:
        """Return a catalog without any country."""
        return cls(countries=[])

    @classmethod
    def from_dict(cls, data: Any) -> Self:
        """Deserialize a catalog from a decoded JSON payload.

        Args:
            data: Decoded payload; must be a mapping with a ``countries`` list.

        Raises:
            DeserializationError: If *data* violates the wire contract.
        """
        if not isinstance(data, dict):
            raise DeserializationError(
                f"relay list payload must be an object, got {type(data).__name__}"
            )
        try:
            return cls.model_validate(data)
        except ValidationError as e:
            logger.debug("relay_list_invalid errors=%d", e.error_count())
            raise DeserializationError(f"invalid relay list: {e}") from e

    @classmethod
    def from_json(cls, payload: str | bytes) -> Self:
        """Deserialize a catalog from raw JSON text or bytes.

        Raises:
            DeserializationError: If *payload* is not valid JSON or violates
                the wire contract.
        """
        try:
            data = json.loads(payload)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            logger.debug("relay_list_malformed_json error=%s", e)
            raise DeserializationError(f"relay list is not valid JSON: {e}") from e
        return cls.from_dict(data)

    # -------------------------------------------------------------------------
    # Serialization
    # -------------------------------------------------------------------------

    def to_json(self, *, indent: int | None = None) -> str:
        """Serialize to a JSON string."""
        return json.dumps(self.to_dict(), indent=indent)

    # -------------------------------------------------------------------------
    # Read helpers
    # -------------------------------------------------------------------------

    def relays(self) -> Iterator[Relay]:
        """Iterate over every relay in catalog order."""
        for country in self.countries:
            for city in country.cities:
                yield from city.relays

    @property
    def relay_count(self) -> int:
        """Total number of relays in the catalog."""
        return sum(1 for _ in self.relays())

    def find_relay(self, hostname: str) -> Relay | None:
        """Return the relay with *hostname*, or ``None``."""
        return next((relay for relay in self.relays() if relay.hostname == hostname), None)

    def find_country(self, code: str) -> RelayListCountry | None:
        """Return the country with *code*, or ``None``."""
        return next((country for country in self.countries if country.code == code), None)

    def with_locations(self) -> Self:
        """Return a copy whose relays carry the location they are listed under.

        Each relay gets a [Location][relaylist.models.location.Location] built
        from its country and city. This catalog is left untouched.
        """
        return self.model_copy(
            update={"countries": [_locate_country(country) for country in self.countries]}
        )


def _locate_country(country: RelayListCountry) -> RelayListCountry:
    cities = []
    for city in country.cities:
        location = Location(
            country=country.name,
            country_code=country.code,
            city=city.name,
            city_code=city.code,
            latitude=city.latitude,
            longitude=city.longitude,
        )
        relays = [relay.with_location(location) for relay in city.relays]
        cities.append(city.model_copy(update={"relays": relays}))
    return country.model_copy(update={"cities": cities})
