"""
Shared base class and field types for relay list wire models.

Provides the Pydantic base class inherited by every catalog model and the
annotated field types that enforce the wire contract at deserialization time:

    [BaseData][relaylist.catalog.base.BaseData]
        Frozen model with ``from_dict()`` / ``to_dict()``.
    ``Port``
        Strict ``int`` in ``0..65535``.
    ``PortRange``
        Inclusive ``(low, high)`` pair with ``low <= high``.
    ``WireguardPublicKey``
        Base64 string decoding to exactly 32 bytes.
    ``NoNullStr`` / ``NonEmptyStr``
        Strict strings without null bytes (the latter also non-empty).
    ``Weight``
        Strict ``int`` in ``0..2**64 - 1``.
    ``Ipv4Addr`` / ``Ipv6Addr``
        Addresses given as text; integers and packed bytes are rejected.

See Also:
    [relaylist.catalog.tunnels][relaylist.catalog.tunnels]: Descriptor models
        built on these types.
    [relaylist.catalog.relay_list][relaylist.catalog.relay_list]: Catalog
        hierarchy built on these types.
"""

from __future__ import annotations

import base64
import binascii
from ipaddress import IPv4Address, IPv6Address
from typing import Annotated, Any, Self

from pydantic import (
    AfterValidator,
    BaseModel,
    BeforeValidator,
    ConfigDict,
    Field,
    StrictInt,
    StrictStr,
)

from relaylist.models.constants import PORT_MAX


WIREGUARD_KEY_LENGTH = 32
WEIGHT_MAX = 2**64 - 1


def _require_address_text(value: Any) -> Any:
    # ipaddress also parses ints and packed bytes; the wire format is text only
    if isinstance(value, str | IPv4Address | IPv6Address):
        return value
    raise ValueError(f"address must be a string, got {type(value).__name__}")


def _reject_null_bytes(value: str) -> str:
    if "\x00" in value:
        raise ValueError("string contains null bytes")
    return value


def _validate_port_range(value: tuple[int, int]) -> tuple[int, int]:
    low, high = value
    if low > high:
        raise ValueError(f"port range start {low} is greater than end {high}")
    return value


def _validate_wireguard_key(value: str) -> str:
    try:
        raw = base64.b64decode(value, validate=True)
    except (binascii.Error, ValueError):
        raise ValueError("public key is not valid base64") from None
    if len(raw) != WIREGUARD_KEY_LENGTH:
        raise ValueError(f"public key must decode to {WIREGUARD_KEY_LENGTH} bytes, got {len(raw)}")
    return value


Port = Annotated[StrictInt, Field(ge=0, le=PORT_MAX)]
PortRange = Annotated[tuple[Port, Port], AfterValidator(_validate_port_range)]
WireguardPublicKey = Annotated[StrictStr, AfterValidator(_validate_wireguard_key)]
NoNullStr = Annotated[StrictStr, AfterValidator(_reject_null_bytes)]
NonEmptyStr = Annotated[StrictStr, Field(min_length=1), AfterValidator(_reject_null_bytes)]
Weight = Annotated[StrictInt, Field(ge=0, le=WEIGHT_MAX)]
Ipv4Addr = Annotated[IPv4Address, BeforeValidator(_require_address_text)]
Ipv6Addr = Annotated[IPv6Address, BeforeValidator(_require_address_text)]


class BaseData(BaseModel):
    """Base class for relay list wire models.

    All subclasses are frozen unless they opt out explicitly (only the
    tunnel and bridge containers do, to support ``clear()``). Unknown keys in
    the payload are ignored so newer server payloads still deserialize.

    Note:
        ``from_dict()`` raises ``pydantic.ValidationError``. The catalog root
        [RelayList.from_dict()][relaylist.catalog.relay_list.RelayList.from_dict]
        translates it into
        [DeserializationError][relaylist.core.exceptions.DeserializationError].
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Self:
        """Create an instance from a dictionary with strict validation."""
        return cls.model_validate(data)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a JSON-compatible dictionary."""
        return self.model_dump(mode="json")
