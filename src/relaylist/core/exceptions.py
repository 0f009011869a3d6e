"""relaylist exception hierarchy.

Provides typed exceptions for the error categories of the package so callers
can tell a bad configuration apart from a bad relay list payload.

Exception hierarchy:

```text
RelayListError (base -- never raised directly)
├── ConfigurationError      -- config validation, missing file, bad YAML
└── DeserializationError    -- relay list payload violates the wire contract
```

Note:
    Endpoint and proxy conversions never raise: every value they consume has
    already been validated when the relay list was deserialized.

See Also:
    [RelayList.from_dict()][relaylist.catalog.relay_list.RelayList.from_dict]:
        Raises [DeserializationError][relaylist.core.exceptions.DeserializationError]
        for malformed payloads.
    [RelayListConfig.from_yaml()][relaylist.core.config.RelayListConfig.from_yaml]:
        Raises [ConfigurationError][relaylist.core.exceptions.ConfigurationError].
"""

from __future__ import annotations


class RelayListError(Exception):
    """Base exception for all relaylist errors.

    Never raised directly -- always use a specific subclass.
    """


class ConfigurationError(RelayListError):
    """Invalid or missing configuration (YAML file, config values).

    See Also:
        [load_yaml()][relaylist.core.yaml.load_yaml]: YAML loading function
            that may trigger configuration errors.
    """


class DeserializationError(RelayListError):
    """A relay list payload could not be turned into a catalog.

    Raised for malformed JSON, wrong types, missing required fields,
    malformed addresses or keys, and invalid port ranges. No partial
    catalog is ever produced. The underlying ``pydantic.ValidationError``
    or ``json.JSONDecodeError`` is chained as ``__cause__``.
    """
