"""Unit tests for relaylist.models.constants."""

from relaylist.models import PORT_MAX, ProxyType, TransportProtocol, TunnelType


class TestTransportProtocol:
    """TransportProtocol StrEnum."""

    def test_valid_values(self):
        assert {member.value for member in TransportProtocol} == {"tcp", "udp"}

    def test_str_compatibility(self):
        assert TransportProtocol.TCP == "tcp"
        assert str(TransportProtocol.UDP) == "udp"

    def test_from_wire_value(self):
        assert TransportProtocol("udp") is TransportProtocol.UDP

    def test_display_name(self):
        assert TransportProtocol.TCP.display_name == "TCP"
        assert TransportProtocol.UDP.display_name == "UDP"


class TestTags:
    """Tunnel and proxy type tags."""

    def test_tunnel_types(self):
        assert {member.value for member in TunnelType} == {"openvpn", "wireguard"}

    def test_proxy_types(self):
        assert {member.value for member in ProxyType} == {"shadowsocks"}

    def test_port_max(self):
        assert PORT_MAX == 65535
