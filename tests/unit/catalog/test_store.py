"""
Unit tests for catalog.store module.

Tests:
- Initial empty snapshot and construction from an existing catalog
- replace() with and without location annotation
- update_from_payload() keeps the previous snapshot on failure
- load_bundled() with configured, missing and invalid files
- from_yaml() factory
"""

import json
import logging
from pathlib import Path
from typing import Any

import pytest

from relaylist.catalog import RelayList, RelayListStore
from relaylist.core.config import LoggingConfig, RelayListConfig
from relaylist.core.exceptions import ConfigurationError, DeserializationError


@pytest.fixture
def plain_config() -> RelayListConfig:
    return RelayListConfig(annotate_locations=False)


@pytest.fixture
def bundled_file(tmp_path: Path, relay_list_payload: dict[str, Any]) -> Path:
    path = tmp_path / "relays.json"
    path.write_text(json.dumps(relay_list_payload), encoding="utf-8")
    return path


class TestInit:
    """Store construction."""

    def test_starts_empty(self):
        store = RelayListStore()
        assert store.current == RelayList.empty()
        assert store.config == RelayListConfig()

    def test_initial_relay_list(self, relay_list, plain_config):
        store = RelayListStore(plain_config, relay_list)
        assert store.current is relay_list

    def test_logger_follows_config(self):
        config = RelayListConfig(logging=LoggingConfig(json_output=True, max_value_length=10))
        store = RelayListStore(config)
        assert store._logger._json_output is True
        assert store._logger._max_value_length == 10
        assert store._logger.name == RelayListStore.LOGGER_NAME


class TestReplace:
    """Snapshot replacement."""

    def test_replace_without_annotation(self, relay_list, plain_config):
        store = RelayListStore(plain_config)
        installed = store.replace(relay_list)
        assert installed is relay_list
        assert store.current is relay_list

    def test_replace_annotates_locations(self, relay_list):
        store = RelayListStore()
        installed = store.replace(relay_list)
        assert store.current is installed
        assert installed.find_relay("se-got-001").location.country_code == "se"
        assert relay_list.find_relay("se-got-001").location is None

    def test_readers_keep_old_snapshot(self, relay_list, plain_config):
        store = RelayListStore(plain_config)
        before = store.current
        store.replace(relay_list)
        assert before == RelayList.empty()
        assert store.current is not before

    def test_replace_logs(self, relay_list, plain_config, caplog):
        store = RelayListStore(plain_config)
        with caplog.at_level(logging.INFO, logger=RelayListStore.LOGGER_NAME):
            store.replace(relay_list)
        record = caplog.records[-1]
        assert record.getMessage() == "relay_list_replaced"
        assert record.structured_kv["relays"] == 3
        assert record.structured_kv["countries"] == 2


class TestUpdateFromPayload:
    """Payload updates."""

    def test_valid_payload(self, relay_list_payload, relay_list, plain_config):
        store = RelayListStore(plain_config)
        store.update_from_payload(json.dumps(relay_list_payload))
        assert store.current == relay_list

    def test_invalid_payload_keeps_previous(self, relay_list, plain_config, caplog):
        store = RelayListStore(plain_config, relay_list)
        with (
            caplog.at_level(logging.ERROR, logger=RelayListStore.LOGGER_NAME),
            pytest.raises(DeserializationError),
        ):
            store.update_from_payload('{"countries": [{"name": "Sweden"}]}')
        assert store.current is relay_list
        assert any(r.getMessage() == "relay_list_rejected" for r in caplog.records)

    def test_null_byte_name_rejected_before_annotation(self, relay_list_payload, relay_list):
        store = RelayListStore()
        before = store.replace(relay_list)
        relay_list_payload["countries"][0]["name"] = "Swe\x00den"
        with pytest.raises(DeserializationError, match="null bytes"):
            store.update_from_payload(json.dumps(relay_list_payload))
        assert store.current is before

    def test_malformed_json_keeps_previous(self, relay_list, plain_config):
        store = RelayListStore(plain_config, relay_list)
        with pytest.raises(DeserializationError):
            store.update_from_payload(b"{")
        assert store.current is relay_list


class TestLoadBundled:
    """Bundled relay list loading."""

    def test_no_path_configured(self):
        store = RelayListStore()
        assert store.load_bundled() is False
        assert store.current == RelayList.empty()

    def test_loads_file(self, bundled_file, relay_list):
        store = RelayListStore(RelayListConfig(bundled_path=bundled_file, annotate_locations=False))
        assert store.load_bundled() is True
        assert store.current == relay_list

    def test_missing_file(self, tmp_path, caplog):
        store = RelayListStore(RelayListConfig(bundled_path=tmp_path / "missing.json"))
        with caplog.at_level(logging.WARNING, logger=RelayListStore.LOGGER_NAME):
            assert store.load_bundled() is False
        assert any(r.getMessage() == "bundled_relay_list_missing" for r in caplog.records)

    def test_invalid_file(self, tmp_path):
        path = tmp_path / "relays.json"
        path.write_text('{"countries": 3}', encoding="utf-8")
        store = RelayListStore(RelayListConfig(bundled_path=path))
        with pytest.raises(DeserializationError):
            store.load_bundled()
        assert store.current == RelayList.empty()


class TestFromYaml:
    """YAML factory."""

    def test_from_yaml(self, tmp_path, bundled_file, relay_list):
        config_file = tmp_path / "relaylist.yaml"
        config_file.write_text(
            f"bundled_path: {bundled_file}\nannotate_locations: false\n", encoding="utf-8"
        )
        store = RelayListStore.from_yaml(config_file)
        assert store.config.bundled_path == bundled_file
        store.load_bundled()
        assert store.current == relay_list

    def test_from_yaml_missing(self, tmp_path):
        with pytest.raises(ConfigurationError):
            RelayListStore.from_yaml(tmp_path / "nope.yaml")
