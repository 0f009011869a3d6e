"""Relay list catalog: wire-format models and the snapshot store.

A server-delivered relay list is deserialized into frozen, typed Pydantic
models. Invalid payloads raise
[DeserializationError][relaylist.core.exceptions.DeserializationError]; no
partial catalog is ever returned.

Model hierarchy:

```text
RelayList
+-- countries: list[RelayListCountry]
    +-- cities: list[RelayListCity]
        +-- relays: list[Relay]
            +-- tunnels: RelayTunnels
            |   +-- openvpn: list[OpenVpnEndpointData]
            |   +-- wireguard: list[WireguardEndpointData]
            +-- bridges: RelayBridges
                +-- shadowsocks: list[ShadowsocksEndpointData]
```

See Also:
    [relaylist.models][relaylist.models]: Endpoint, proxy and location values
        produced from these models.
"""

from .base import BaseData, Port, PortRange, WireguardPublicKey
from .relay_list import Relay, RelayList, RelayListCity, RelayListCountry
from .store import RelayListStore
from .tunnels import (
    OpenVpnEndpointData,
    RelayBridges,
    RelayTunnels,
    ShadowsocksEndpointData,
    WireguardEndpointData,
)


__all__ = [
    "BaseData",
    "OpenVpnEndpointData",
    "Port",
    "PortRange",
    "Relay",
    "RelayBridges",
    "RelayList",
    "RelayListCity",
    "RelayListCountry",
    "RelayListStore",
    "RelayTunnels",
    "ShadowsocksEndpointData",
    "WireguardEndpointData",
    "WireguardPublicKey",
]
