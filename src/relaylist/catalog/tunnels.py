"""
Per-protocol tunnel and bridge descriptors offered by a relay.

Each descriptor holds only the fields needed to dial its protocol. The
relay's public address is never part of a descriptor; conversion methods take
it as an argument, usually ``Relay.ipv4_addr_in``.

Model hierarchy:

```text
RelayTunnels                          Tunnel descriptors of one relay
+-- openvpn: list[OpenVpnEndpointData]
|   +-- port, protocol
+-- wireguard: list[WireguardEndpointData]
    +-- port_ranges, ipv4_gateway, ipv6_gateway, public_key
RelayBridges                          Bridge descriptors of one relay
+-- shadowsocks: list[ShadowsocksEndpointData]
    +-- port, cipher, password, protocol
```

See Also:
    [relaylist.catalog.relay_list.Relay][relaylist.catalog.relay_list.Relay]:
        Owner of a ``RelayTunnels`` and a ``RelayBridges`` instance.
    [relaylist.models.endpoint][relaylist.models.endpoint]: Endpoint values
        produced by OpenVPN descriptors.
    [relaylist.models.proxy][relaylist.models.proxy]: Proxy settings produced
        by Shadowsocks descriptors.
"""

from __future__ import annotations

from ipaddress import IPv4Address, IPv6Address

from pydantic import ConfigDict, Field, StrictStr

from relaylist.models.constants import ProxyType, TransportProtocol, TunnelType
from relaylist.models.endpoint import Endpoint, OpenVpnEndpoint
from relaylist.models.proxy import ShadowsocksProxySettings, SocketAddress

from .base import BaseData, Ipv4Addr, Ipv6Addr, Port, PortRange, WireguardPublicKey


# =============================================================================
# Tunnel descriptors
# =============================================================================


class OpenVpnEndpointData(BaseData):
    """OpenVPN port and transport protocol of a relay.

    Examples:
        ```python
        data = OpenVpnEndpointData(port=1194, protocol=TransportProtocol.UDP)
        str(data)                                   # 'UDP port 1194'
        data.to_endpoint(IPv4Address("185.65.134.66"))
        # OpenVpnEndpoint(endpoint=Endpoint(address=IPv4Address('185.65.134.66'), ...))
        ```
    """

    port: Port
    protocol: TransportProtocol

    def to_endpoint(self, host: IPv4Address | IPv6Address) -> OpenVpnEndpoint:
        """Build the OpenVPN endpoint for this descriptor at *host*.

        Port and protocol are carried over unchanged.
        """
        return OpenVpnEndpoint(Endpoint(host, self.port, self.protocol))

    def __str__(self) -> str:
        return f"{self.protocol.display_name} port {self.port}"


class WireguardEndpointData(BaseData):
    """WireGuard gateway offered by a relay.

    There is no single-call conversion for WireGuard: the connection layer
    picks a port from ``port_ranges`` (see ``contains_port()``) and pairs it
    with the public key and gateways itself.

    Attributes:
        port_ranges: Inclusive ``(low, high)`` port ranges. ``low <= high``
            holds for every entry; ranges may overlap.
        ipv4_gateway: Tunnel-internal IPv4 gateway address.
        ipv6_gateway: Tunnel-internal IPv6 gateway address.
        public_key: The relay's base64-encoded WireGuard public key.
    """

    port_ranges: tuple[PortRange, ...]
    ipv4_gateway: Ipv4Addr
    ipv6_gateway: Ipv6Addr
    public_key: WireguardPublicKey

    def contains_port(self, port: int) -> bool:
        """Return whether *port* lies within any of the port ranges."""
        return any(low <= port <= high for low, high in self.port_ranges)

    def __str__(self) -> str:
        ranges = ",".join(f"[{low} - {high}]" for low, high in self.port_ranges)
        return (
            f"gateways {self.ipv4_gateway} - {self.ipv6_gateway} "
            f"port_ranges {{ {ranges} }} public_key {self.public_key}"
        )


# =============================================================================
# Bridge descriptors
# =============================================================================


class ShadowsocksEndpointData(BaseData):
    """Shadowsocks bridge offered by a relay.

    The password is a shared secret published in the relay list; it is
    excluded from ``repr`` and from ``str`` so diagnostics never print it.
    """

    port: Port
    cipher: StrictStr
    password: StrictStr = Field(repr=False)
    protocol: TransportProtocol

    def to_proxy_settings(self, peer: IPv4Address | IPv6Address) -> ShadowsocksProxySettings:
        """Build Shadowsocks proxy settings for the bridge at *peer*.

        Cipher and password are copied from the descriptor; the peer socket
        address is ``(peer, port)``.
        """
        return ShadowsocksProxySettings(
            peer=SocketAddress(peer, self.port),
            password=self.password,
            cipher=self.cipher,
        )

    def __str__(self) -> str:
        return f"{self.protocol.display_name} port {self.port} cipher {self.cipher}"


# =============================================================================
# Containers
# =============================================================================


class RelayTunnels(BaseData):
    """Tunnel descriptors of a relay, grouped by protocol.

    Missing lists default to empty, so both an absent ``tunnels`` key and
    ``{}`` deserialize to an empty instance. Unlike the other catalog models
    this container is mutable through ``clear()``, which must only be called
    on an instance the caller owns exclusively.
    """

    model_config = ConfigDict(frozen=False, validate_assignment=True)

    openvpn: list[OpenVpnEndpointData] = Field(default_factory=list)
    wireguard: list[WireguardEndpointData] = Field(default_factory=list)

    def is_empty(self) -> bool:
        """Return True when no tunnel of any protocol is listed."""
        return not self.openvpn and not self.wireguard

    def clear(self) -> None:
        """Drop every tunnel descriptor.

        The lists are replaced rather than emptied in place, so lists a
        caller obtained earlier keep their contents.
        """
        self.openvpn = []
        self.wireguard = []

    def supports(self, tunnel_type: TunnelType) -> bool:
        """Return whether at least one tunnel of *tunnel_type* is listed."""
        if tunnel_type == TunnelType.OPENVPN:
            return bool(self.openvpn)
        return bool(self.wireguard)


class RelayBridges(BaseData):
    """Bridge descriptors of a relay, grouped by protocol.

    Follows the same default-if-absent and ``clear()`` rules as
    [RelayTunnels][relaylist.catalog.tunnels.RelayTunnels].
    """

    model_config = ConfigDict(frozen=False, validate_assignment=True)

    shadowsocks: list[ShadowsocksEndpointData] = Field(default_factory=list)

    def is_empty(self) -> bool:
        """Return True when no bridge of any protocol is listed."""
        return not self.shadowsocks

    def clear(self) -> None:
        """Drop every bridge descriptor, leaving earlier-extracted lists intact."""
        self.shadowsocks = []

    def supports(self, proxy_type: ProxyType) -> bool:
        """Return whether at least one bridge of *proxy_type* is listed."""
        return proxy_type == ProxyType.SHADOWSOCKS and bool(self.shadowsocks)
