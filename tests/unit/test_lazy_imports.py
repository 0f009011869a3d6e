"""Tests for lazy import system in relaylist.__init__."""

from __future__ import annotations

import importlib
import sys

import pytest


class TestLazyImports:
    """Test PEP 562 lazy loading in relaylist.__init__."""

    def test_lazy_import_does_not_eagerly_load(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Verify that importing relaylist does not eagerly load subpackages."""
        # Drop cached relaylist modules; monkeypatch restores them afterwards
        for mod in list(sys.modules):
            if mod == "relaylist" or mod.startswith("relaylist."):
                monkeypatch.delitem(sys.modules, mod)

        importlib.import_module("relaylist")

        assert "relaylist.core" not in sys.modules
        assert "relaylist.models" not in sys.modules
        assert "relaylist.catalog" not in sys.modules

    def test_lazy_import_resolves_on_access(self) -> None:
        """Verify that lazy attributes resolve correctly."""
        from relaylist import RelayList
        from relaylist.catalog.relay_list import RelayList as DirectRelayList

        assert RelayList is DirectRelayList

    def test_lazy_import_caches_after_first_access(self) -> None:
        """Verify that resolved attributes are cached in globals."""
        import relaylist

        _ = relaylist.Endpoint

        assert "Endpoint" in vars(relaylist)

    def test_lazy_import_invalid_attribute(self) -> None:
        """Verify that invalid attributes raise AttributeError."""
        import relaylist

        with pytest.raises(AttributeError, match="no_such_thing"):
            _ = getattr(relaylist, "no_such_thing")  # noqa: B009

    def test_all_exports_are_in_lazy_imports(self) -> None:
        """Verify that __all__ and _LAZY_IMPORTS are in sync."""
        import relaylist

        assert set(relaylist.__all__) == set(relaylist._LAZY_IMPORTS)

    def test_dir_returns_all(self) -> None:
        """Verify that dir(relaylist) returns __all__."""
        import relaylist

        assert dir(relaylist) == relaylist.__all__

    def test_version_is_accessible(self) -> None:
        """Verify that __version__ is set from package metadata."""
        import relaylist

        assert isinstance(relaylist.__version__, str)
        assert relaylist.__version__
