"""Core layer: exceptions, structured logging and configuration.

Depends only on third-party libraries (pydantic, PyYAML) and is depended upon
by ``relaylist.catalog``.

Attributes:
    RelayListError: Base of the exception hierarchy. See
        [relaylist.core.exceptions][relaylist.core.exceptions].
    Logger: Structured logger supporting key=value and JSON output modes.
        See [Logger][relaylist.core.logger.Logger].
    RelayListConfig: Pydantic configuration for the relay list store, loaded
        with [from_yaml()][relaylist.core.config.RelayListConfig.from_yaml].
    load_yaml: Safe YAML loading with ``yaml.safe_load()``.
"""

from .config import LoggingConfig, RelayListConfig
from .exceptions import ConfigurationError, DeserializationError, RelayListError
from .logger import Logger, StructuredFormatter, format_kv_pairs
from .yaml import load_yaml


__all__ = [
    "ConfigurationError",
    "DeserializationError",
    "Logger",
    "LoggingConfig",
    "RelayListConfig",
    "RelayListError",
    "StructuredFormatter",
    "format_kv_pairs",
    "load_yaml",
]
