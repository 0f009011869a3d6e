"""Shared constants for the models layer.

Defines enumerations used across the models and catalog layers. Placing them
here avoids circular dependencies between endpoint, proxy, and catalog
modules.

See Also:
    [relaylist.models.endpoint][]: Uses
        [TransportProtocol][relaylist.models.constants.TransportProtocol] and
        [TunnelType][relaylist.models.constants.TunnelType] to tag endpoints.
    [relaylist.models.proxy][]: Uses
        [ProxyType][relaylist.models.constants.ProxyType] to tag proxy settings.
    [relaylist.catalog.tunnels][]: Descriptor models carrying a
        ``protocol`` field.
"""

from __future__ import annotations

from enum import StrEnum


class TransportProtocol(StrEnum):
    """Transport-layer protocol used to reach a relay port.

    The string values are the lower-case forms used on the wire
    (``"tcp"``/``"udp"``). Diagnostic output uses
    [display_name][relaylist.models.constants.TransportProtocol.display_name]
    instead.

    Attributes:
        TCP: Transmission Control Protocol.
        UDP: User Datagram Protocol.

    Examples:
        ```python
        TransportProtocol("udp")               # TransportProtocol.UDP
        TransportProtocol.UDP.display_name     # 'UDP'
        ```
    """

    TCP = "tcp"
    UDP = "udp"

    @property
    def display_name(self) -> str:
        """Upper-case name used in human-readable descriptions."""
        return self.value.upper()


class TunnelType(StrEnum):
    """VPN tunnel protocol families a relay may offer.

    Attributes:
        OPENVPN: OpenVPN tunnels, dialed through
            [OpenVpnEndpoint][relaylist.models.endpoint.OpenVpnEndpoint].
        WIREGUARD: WireGuard tunnels, consumed directly from
            [WireguardEndpointData][relaylist.catalog.tunnels.WireguardEndpointData].
    """

    OPENVPN = "openvpn"
    WIREGUARD = "wireguard"


class ProxyType(StrEnum):
    """Obfuscation bridge families a relay may offer.

    Attributes:
        SHADOWSOCKS: Shadowsocks proxy, configured through
            [ShadowsocksProxySettings][relaylist.models.proxy.ShadowsocksProxySettings].
    """

    SHADOWSOCKS = "shadowsocks"


PORT_MAX = 65_535
