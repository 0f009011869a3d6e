"""
Single-writer, multiple-reader holder of the current relay list snapshot.

Readers call [current][relaylist.catalog.store.RelayListStore.current] and
keep the returned [RelayList][relaylist.catalog.relay_list.RelayList] for as
long as they need a consistent view; a writer installs a new snapshot with
[replace()][relaylist.catalog.store.RelayListStore.replace]. Snapshots are
never mutated after installation, so readers need no locking.

Examples:
    ```python
    store = RelayListStore.from_yaml("config/relaylist.yaml")
    store.load_bundled()

    # after a fetch
    store.update_from_payload(response_body)
    for relay in store.current.relays():
        ...
    ```

See Also:
    [RelayListConfig][relaylist.core.config.RelayListConfig]: Configuration
        consumed by the store.
"""

from __future__ import annotations

import threading
from pathlib import Path
from typing import Self

from relaylist.core.config import RelayListConfig
from relaylist.core.exceptions import DeserializationError
from relaylist.core.logger import Logger

from .relay_list import RelayList


class RelayListStore:
    """Holds the latest complete relay list and swaps it atomically.

    Attributes:
        _config: Store configuration.
        _logger: [Logger][relaylist.core.logger.Logger] named
            ``relaylist.store``.
        _lock: Serializes writers; readers never take it.
        _current: The installed snapshot, ``RelayList.empty()`` until the
            first successful ``replace()``.
    """

    LOGGER_NAME = "relaylist.store"

    def __init__(
        self,
        config: RelayListConfig | None = None,
        relay_list: RelayList | None = None,
    ) -> None:
        self._config = config if config is not None else RelayListConfig()
        self._logger = Logger(
            self.LOGGER_NAME,
            json_output=self._config.logging.json_output,
            max_value_length=self._config.logging.max_value_length,
        )
        self._lock = threading.Lock()
        self._current = RelayList.empty()
        if relay_list is not None:
            self.replace(relay_list)

    @classmethod
    def from_yaml(cls, config_path: str | Path) -> Self:
        """Create a store from a YAML configuration file.

        Raises:
            ConfigurationError: If the configuration is missing or invalid.
        """
        return cls(config=RelayListConfig.from_yaml(config_path))

    @property
    def config(self) -> RelayListConfig:
        """The store configuration."""
        return self._config

    @property
    def current(self) -> RelayList:
        """The latest installed snapshot."""
        return self._current

    def replace(self, relay_list: RelayList) -> RelayList:
        """Install *relay_list* as the current snapshot.

        When ``annotate_locations`` is enabled the installed snapshot is a
        copy carrying hierarchy-derived locations.

        Returns:
            The snapshot that was installed.
        """
        if self._config.annotate_locations:
            relay_list = relay_list.with_locations()
        with self._lock:
            previous = self._current
            self._current = relay_list
        self._logger.info(
            "relay_list_replaced",
            countries=len(relay_list.countries),
            relays=relay_list.relay_count,
            previous_relays=previous.relay_count,
        )
        return relay_list

    def update_from_payload(self, payload: str | bytes) -> RelayList:
        """Deserialize *payload* and install it.

        The previous snapshot stays current when deserialization fails.

        Raises:
            DeserializationError: If *payload* violates the wire contract.
        """
        try:
            relay_list = RelayList.from_json(payload)
        except DeserializationError as e:
            self._logger.error("relay_list_rejected", error=e)
            raise
        return self.replace(relay_list)

    def load_bundled(self) -> bool:
        """Install the bundled relay list named by ``bundled_path``.

        Returns:
            True if a bundled list was installed, False when no path is
            configured or the file does not exist.

        Raises:
            DeserializationError: If the bundled file is not a valid relay list.
        """
        path = self._config.bundled_path
        if path is None:
            return False
        if not path.is_file():
            self._logger.warning("bundled_relay_list_missing", path=path)
            return False
        self.update_from_payload(path.read_bytes())
        self._logger.debug("bundled_relay_list_loaded", path=path)
        return True
