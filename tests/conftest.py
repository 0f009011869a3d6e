"""
Pytest configuration and shared fixtures for relaylist tests.

Provides:
- A WireGuard public key and a complete relay list payload
- A deserialized RelayList built from that payload
"""

from __future__ import annotations

import copy
import logging
from typing import Any

import pytest

from relaylist.catalog import RelayList


PUBLIC_KEY = "BLNHNoGO88LjV/wDBa7CUUwUzPq/fO2UwcGLy56hKy4="

_RELAY_LIST_PAYLOAD: dict[str, Any] = {
    "countries": [
        {
            "name": "Sweden",
            "code": "se",
            "cities": [
                {
                    "name": "Gothenburg",
                    "code": "got",
                    "latitude": 57.70887,
                    "longitude": 11.97456,
                    "relays": [
                        {
                            "hostname": "se-got-001",
                            "ipv4_addr_in": "185.213.154.66",
                            "include_in_country": True,
                            "weight": 100,
                            "tunnels": {
                                "openvpn": [
                                    {"port": 1194, "protocol": "udp"},
                                    {"port": 443, "protocol": "tcp"},
                                ],
                                "wireguard": [
                                    {
                                        "port_ranges": [[53, 53], [4000, 33433]],
                                        "ipv4_gateway": "10.64.0.1",
                                        "ipv6_gateway": "fc00:bbbb:bbbb:bb01::1",
                                        "public_key": PUBLIC_KEY,
                                    }
                                ],
                            },
                            "bridges": {
                                "shadowsocks": [
                                    {
                                        "port": 443,
                                        "cipher": "aes-256-gcm",
                                        "password": "mullvad",
                                        "protocol": "tcp",
                                    }
                                ]
                            },
                        },
                        {
                            "hostname": "se-got-002",
                            "ipv4_addr_in": "185.213.154.67",
                            "include_in_country": True,
                            "weight": 200,
                        },
                    ],
                }
            ],
        },
        {
            "name": "Germany",
            "code": "de",
            "cities": [
                {
                    "name": "Frankfurt",
                    "code": "fra",
                    "latitude": 50.110924,
                    "longitude": 8.682127,
                    "relays": [
                        {
                            "hostname": "de-fra-001",
                            "ipv4_addr_in": "185.213.155.10",
                            "include_in_country": False,
                            "weight": 50,
                            "tunnels": {"openvpn": [{"port": 1300, "protocol": "udp"}]},
                        }
                    ],
                }
            ],
        },
    ]
}


@pytest.fixture(scope="session", autouse=True)
def setup_logging() -> None:
    """Configure logging for tests."""
    logging.basicConfig(level=logging.DEBUG)


@pytest.fixture
def public_key() -> str:
    """Valid base64-encoded 32-byte WireGuard public key."""
    return PUBLIC_KEY


@pytest.fixture
def relay_list_payload() -> dict[str, Any]:
    """Complete relay list payload, safe to mutate per test."""
    return copy.deepcopy(_RELAY_LIST_PAYLOAD)


@pytest.fixture
def relay_list(relay_list_payload: dict[str, Any]) -> RelayList:
    """RelayList deserialized from ``relay_list_payload``."""
    return RelayList.from_dict(relay_list_payload)
