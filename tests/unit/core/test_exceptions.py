"""Unit tests for the relaylist exception hierarchy.

Tests verify:
- issubclass relationships match the documented tree
- except clauses catch the expected subclasses
- all exceptions accept a message string
"""

import pytest

from relaylist.core.exceptions import ConfigurationError, DeserializationError, RelayListError


ALL_CONCRETE = (ConfigurationError, DeserializationError)

ALL_CLASSES = (RelayListError, *ALL_CONCRETE)


class TestExceptionHierarchy:
    """Verify issubclass relationships match the documented tree."""

    @pytest.mark.parametrize("exc_cls", ALL_CONCRETE)
    def test_all_concrete_inherit_from_relay_list_error(self, exc_cls: type) -> None:
        assert issubclass(exc_cls, RelayListError)

    def test_siblings_unrelated(self) -> None:
        assert not issubclass(ConfigurationError, DeserializationError)
        assert not issubclass(DeserializationError, ConfigurationError)

    def test_not_value_error(self) -> None:
        assert not issubclass(DeserializationError, ValueError)


class TestExceptionCatching:
    """Verify except clauses catch the expected subclasses."""

    @pytest.mark.parametrize("exc_cls", ALL_CONCRETE)
    def test_base_catches_all_concrete(self, exc_cls: type) -> None:
        with pytest.raises(RelayListError):
            raise exc_cls("test")

    def test_cause_is_preserved(self) -> None:
        cause = ValueError("bad port")
        with pytest.raises(DeserializationError) as exc_info:
            raise DeserializationError("invalid relay list") from cause
        assert exc_info.value.__cause__ is cause


class TestExceptionInstantiation:
    """Verify all exceptions can be instantiated with a message."""

    @pytest.mark.parametrize("exc_cls", ALL_CLASSES)
    def test_accepts_message(self, exc_cls: type) -> None:
        exc = exc_cls("something went wrong")
        assert str(exc) == "something went wrong"

    @pytest.mark.parametrize("exc_cls", ALL_CLASSES)
    def test_accepts_empty_message(self, exc_cls: type) -> None:
        assert isinstance(exc_cls(), RelayListError)
