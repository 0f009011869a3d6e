"""
Connectable tunnel endpoints produced from relay descriptors.

An [Endpoint][relaylist.models.endpoint.Endpoint] is a socket address plus
the transport protocol used to reach it. Tunnel-specific variants wrap an
endpoint and carry a [TunnelType][relaylist.models.constants.TunnelType] tag
so the connection layer can dispatch on the tunnel family.

See Also:
    [OpenVpnEndpointData.to_endpoint()][relaylist.catalog.tunnels.OpenVpnEndpointData.to_endpoint]:
        Builds an [OpenVpnEndpoint][relaylist.models.endpoint.OpenVpnEndpoint]
        from a catalog descriptor and a host address.
"""

from __future__ import annotations

from dataclasses import dataclass
from ipaddress import IPv4Address, IPv6Address
from typing import ClassVar

from ._validation import validate_instance, validate_ip_address, validate_port
from .constants import TransportProtocol, TunnelType
from .proxy import SocketAddress


@dataclass(frozen=True, slots=True)
class Endpoint:
    """Immutable network endpoint: address, port and transport protocol.

    Attributes:
        address: IPv4 or IPv6 host address.
        port: Port number (``0..65535``).
        protocol: [TransportProtocol][relaylist.models.constants.TransportProtocol]
            used to reach the port.

    Raises:
        TypeError: If a field has the wrong type.
        ValueError: If the port is out of range.

    Examples:
        ```python
        endpoint = Endpoint(IPv4Address("185.65.134.66"), 1194, TransportProtocol.UDP)
        str(endpoint)   # '185.65.134.66:1194/UDP'
        ```
    """

    address: IPv4Address | IPv6Address
    port: int
    protocol: TransportProtocol

    def __post_init__(self) -> None:
        validate_ip_address(self.address, "address")
        validate_port(self.port, "port")
        validate_instance(self.protocol, TransportProtocol, "protocol")

    @property
    def socket_address(self) -> SocketAddress:
        """The ``(address, port)`` pair of this endpoint."""
        return SocketAddress(self.address, self.port)

    def __str__(self) -> str:
        return f"{self.socket_address}/{self.protocol.display_name}"


@dataclass(frozen=True, slots=True)
class OpenVpnEndpoint:
    """An [Endpoint][relaylist.models.endpoint.Endpoint] to dial with OpenVPN."""

    endpoint: Endpoint

    tunnel_type: ClassVar[TunnelType] = TunnelType.OPENVPN

    def __post_init__(self) -> None:
        validate_instance(self.endpoint, Endpoint, "endpoint")

    def __str__(self) -> str:
        return f"{self.tunnel_type} {self.endpoint}"
