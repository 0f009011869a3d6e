r"""relaylist -- VPN relay catalog and endpoint descriptors.

Models the catalog of relay servers delivered to a VPN client (country, city
and relay hierarchy with per-protocol tunnel and bridge data) and turns a
chosen relay's descriptors into connectable endpoints and proxy settings.

Architecture follows a layered dependency structure where imports flow
strictly downward:

```text
        catalog          Wire-format Pydantic models, snapshot store
        /     \
     core     |          Exceptions, logging, configuration
              |
        models           Pure frozen dataclasses (zero I/O)
```

Note:
    Top-level imports (``from relaylist import RelayList``) use lazy loading
    and resolve on first access.
"""

import importlib
from importlib.metadata import version as _get_version


__version__ = _get_version("relaylist")

__all__ = [
    "ConfigurationError",
    "DeserializationError",
    "Endpoint",
    "Location",
    "Logger",
    "OpenVpnEndpoint",
    "OpenVpnEndpointData",
    "Relay",
    "RelayBridges",
    "RelayList",
    "RelayListCity",
    "RelayListConfig",
    "RelayListCountry",
    "RelayListError",
    "RelayListStore",
    "RelayTunnels",
    "ShadowsocksEndpointData",
    "ShadowsocksProxySettings",
    "TransportProtocol",
    "WireguardEndpointData",
]

_LAZY_IMPORTS: dict[str, tuple[str, str]] = {
    "ConfigurationError": ("relaylist.core", "ConfigurationError"),
    "DeserializationError": ("relaylist.core", "DeserializationError"),
    "Logger": ("relaylist.core", "Logger"),
    "RelayListConfig": ("relaylist.core", "RelayListConfig"),
    "RelayListError": ("relaylist.core", "RelayListError"),
    "Endpoint": ("relaylist.models", "Endpoint"),
    "Location": ("relaylist.models", "Location"),
    "OpenVpnEndpoint": ("relaylist.models", "OpenVpnEndpoint"),
    "ShadowsocksProxySettings": ("relaylist.models", "ShadowsocksProxySettings"),
    "TransportProtocol": ("relaylist.models", "TransportProtocol"),
    "OpenVpnEndpointData": ("relaylist.catalog", "OpenVpnEndpointData"),
    "Relay": ("relaylist.catalog", "Relay"),
    "RelayBridges": ("relaylist.catalog", "RelayBridges"),
    "RelayList": ("relaylist.catalog", "RelayList"),
    "RelayListCity": ("relaylist.catalog", "RelayListCity"),
    "RelayListCountry": ("relaylist.catalog", "RelayListCountry"),
    "RelayListStore": ("relaylist.catalog", "RelayListStore"),
    "RelayTunnels": ("relaylist.catalog", "RelayTunnels"),
    "ShadowsocksEndpointData": ("relaylist.catalog", "ShadowsocksEndpointData"),
    "WireguardEndpointData": ("relaylist.catalog", "WireguardEndpointData"),
}


def __getattr__(name: str) -> object:
    if name in _LAZY_IMPORTS:
        module_path, attr_name = _LAZY_IMPORTS[name]
        module = importlib.import_module(module_path)
        value = getattr(module, attr_name)
        globals()[name] = value  # Cache for subsequent access
        return value
    raise AttributeError(f"module 'relaylist' has no attribute {name!r}")


def __dir__() -> list[str]:
    return __all__
