"""
Pydantic configuration models for relaylist.

Configuration is usually loaded from YAML via
[RelayListConfig.from_yaml()][relaylist.core.config.RelayListConfig.from_yaml]:

```yaml
bundled_path: /opt/vpn/resources/relays.json
annotate_locations: true
logging:
  json_output: false
  max_value_length: 500
```

See Also:
    [RelayListStore][relaylist.catalog.store.RelayListStore]: Consumer of
        this configuration.
    [load_yaml()][relaylist.core.yaml.load_yaml]: YAML loader used by
        ``from_yaml()``.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Self

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .exceptions import ConfigurationError
from .yaml import load_yaml


class LoggingConfig(BaseModel):
    """Structured logging options passed to [Logger][relaylist.core.logger.Logger]."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    json_output: bool = Field(
        default=False,
        description="Emit JSON log lines instead of key=value pairs",
    )
    max_value_length: int = Field(
        default=1000,
        ge=1,
        description="Truncate logged values longer than this many characters",
    )


class RelayListConfig(BaseModel):
    """Configuration of a [RelayListStore][relaylist.catalog.store.RelayListStore].

    Attributes:
        bundled_path: JSON relay list shipped with the client and used as the
            initial snapshot before the first successful fetch. ``None``
            starts from an empty catalog.
        annotate_locations: Attach hierarchy-derived
            [Location][relaylist.models.location.Location] values to every
            relay when a snapshot is installed.
        logging: Structured logging options.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    bundled_path: Path | None = Field(
        default=None,
        description="Bundled relay list JSON used as the initial snapshot",
    )
    annotate_locations: bool = Field(
        default=True,
        description="Attach country/city locations to relays on replace",
    )
    logging: LoggingConfig = Field(
        default_factory=LoggingConfig,
        description="Structured logging options",
    )

    @classmethod
    def from_dict(cls, data: Any) -> Self:
        """Validate a configuration mapping.

        Raises:
            ConfigurationError: If *data* is not a mapping or holds invalid values.
        """
        if not isinstance(data, dict):
            raise ConfigurationError(
                f"configuration must be a mapping, got {type(data).__name__}"
            )
        try:
            return cls.model_validate(data)
        except ValidationError as e:
            raise ConfigurationError(f"invalid relay list configuration: {e}") from e

    @classmethod
    def from_yaml(cls, config_path: str | Path) -> Self:
        """Load and validate a YAML configuration file.

        Delegates to [load_yaml()][relaylist.core.yaml.load_yaml] for safe
        parsing, then to ``from_dict()``.

        Raises:
            ConfigurationError: If the file is missing, is not valid YAML,
                or holds invalid values.
        """
        try:
            data = load_yaml(config_path)
        except FileNotFoundError as e:
            raise ConfigurationError(str(e)) from e
        except yaml.YAMLError as e:
            raise ConfigurationError(f"invalid YAML in {config_path}: {e}") from e
        return cls.from_dict(data)
