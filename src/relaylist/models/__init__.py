"""Pure frozen dataclasses with zero I/O for endpoints, proxies and locations.

The models layer is the foundation of the package. It has **no dependencies**
on any other relaylist package -- only the Python standard library. Every
model uses ``@dataclass(frozen=True, slots=True)`` and validates its fields in
``__post_init__`` so invalid instances never escape the constructor.

Wire-format relay list models (``RelayList``, ``Relay``, descriptors) live in
the separate ``relaylist.catalog`` package and produce the values defined here.

Attributes:
    Endpoint: Address, port and
        [TransportProtocol][relaylist.models.constants.TransportProtocol].
    OpenVpnEndpoint: Endpoint tagged as an OpenVPN tunnel target.
    SocketAddress: ``(ip, port)`` named tuple.
    ShadowsocksProxySettings: Peer, password and cipher of a Shadowsocks
        bridge.
    Location: Runtime geographic annotation of a relay.
    TransportProtocol, TunnelType, ProxyType: Shared enumerations.

See Also:
    [relaylist.catalog][relaylist.catalog]: Relay list models that convert
        descriptors into these values.
"""

from .constants import PORT_MAX, ProxyType, TransportProtocol, TunnelType
from .endpoint import Endpoint, OpenVpnEndpoint
from .location import Location
from .proxy import ShadowsocksProxySettings, SocketAddress


__all__ = [
    "PORT_MAX",
    "Endpoint",
    "Location",
    "OpenVpnEndpoint",
    "ProxyType",
    "ShadowsocksProxySettings",
    "SocketAddress",
    "TransportProtocol",
    "TunnelType",
]
