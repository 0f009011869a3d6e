"""Shared validation helpers for frozen dataclass models.

Private module, not part of the public API. Used exclusively by
``__post_init__`` methods in sibling model modules to enforce runtime
type constraints and null-byte safety.
"""

from __future__ import annotations

import math
from ipaddress import IPv4Address, IPv6Address
from typing import Any

from .constants import PORT_MAX


def validate_instance(value: Any, expected: type | tuple[type, ...], name: str) -> None:
    """Raise ``TypeError`` if *value* is not an instance of *expected*."""
    if not isinstance(value, expected):
        if isinstance(expected, tuple):
            expected_name = " or ".join(t.__name__ for t in expected)
        else:
            expected_name = expected.__name__
        article = "an" if expected_name[0] in "AEIOUaeiou" else "a"
        raise TypeError(f"{name} must be {article} {expected_name}, got {type(value).__name__}")


def validate_port(value: Any, name: str) -> None:
    """Raise if *value* is not an ``int`` in ``0..65535`` (``bool`` excluded)."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")
    if not 0 <= value <= PORT_MAX:
        raise ValueError(f"{name} must be between 0 and {PORT_MAX}, got {value}")


def validate_ip_address(value: Any, name: str) -> None:
    """Raise ``TypeError`` if *value* is not an ``IPv4Address`` or ``IPv6Address``."""
    validate_instance(value, (IPv4Address, IPv6Address), name)


def validate_str_no_null(value: Any, name: str) -> None:
    """Raise if *value* is not a ``str`` or contains null bytes."""
    if not isinstance(value, str):
        raise TypeError(f"{name} must be a str, got {type(value).__name__}")
    if "\x00" in value:
        raise ValueError(f"{name} contains null bytes")


def validate_str_not_empty(value: Any, name: str) -> None:
    """Raise if *value* is not a non-empty ``str`` without null bytes."""
    validate_str_no_null(value, name)
    if not value:
        raise ValueError(f"{name} must not be empty")


def validate_coordinate(value: Any, name: str, limit: float) -> None:
    """Raise if *value* is not a finite number within ``[-limit, limit]``."""
    if isinstance(value, bool) or not isinstance(value, int | float):
        raise TypeError(f"{name} must be a float, got {type(value).__name__}")
    if not math.isfinite(value) or not -limit <= value <= limit:
        raise ValueError(f"{name} must be between {-limit} and {limit}, got {value}")
