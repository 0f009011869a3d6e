"""
Proxy settings for reaching a relay through an obfuscation bridge.

See Also:
    [ShadowsocksEndpointData.to_proxy_settings()][relaylist.catalog.tunnels.ShadowsocksEndpointData.to_proxy_settings]:
        Builds [ShadowsocksProxySettings][relaylist.models.proxy.ShadowsocksProxySettings]
        from a bridge descriptor and a peer address.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from ipaddress import IPv4Address, IPv6Address
from typing import ClassVar, NamedTuple

from ._validation import validate_instance, validate_ip_address, validate_port, validate_str_no_null
from .constants import ProxyType


class SocketAddress(NamedTuple):
    """IP address and port pair."""

    ip: IPv4Address | IPv6Address
    port: int

    def __str__(self) -> str:
        if isinstance(self.ip, IPv6Address):
            return f"[{self.ip}]:{self.port}"
        return f"{self.ip}:{self.port}"


@dataclass(frozen=True, slots=True)
class ShadowsocksProxySettings:
    """Parameters a transport layer needs to open a Shadowsocks proxy.

    Attributes:
        peer: Socket address of the Shadowsocks server.
        password: Shared secret. Hidden from ``repr``.
        cipher: Cipher name (e.g. ``aes-256-gcm``).

    Raises:
        TypeError: If a field has the wrong type.
        ValueError: If the port is out of range or a string contains null bytes.
    """

    peer: SocketAddress
    password: str = field(repr=False)
    cipher: str

    proxy_type: ClassVar[ProxyType] = ProxyType.SHADOWSOCKS

    def __post_init__(self) -> None:
        validate_instance(self.peer, SocketAddress, "peer")
        validate_ip_address(self.peer.ip, "peer.ip")
        validate_port(self.peer.port, "peer.port")
        validate_str_no_null(self.password, "password")
        validate_str_no_null(self.cipher, "cipher")
