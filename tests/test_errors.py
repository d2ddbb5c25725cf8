"""Tests for flauta.errors — exception hierarchy and messages."""

import pytest

from flauta.errors import (
    ConfigurationError,
    FlautaError,
    LoadError,
    MissingHandlerError,
    ModuleLoadError,
)


class TestHierarchy:
    def test_configuration_error_is_flauta_error(self) -> None:
        assert issubclass(ConfigurationError, FlautaError)

    def test_load_error_is_flauta_error(self) -> None:
        assert issubclass(LoadError, FlautaError)

    def test_module_load_error_is_load_error(self) -> None:
        assert issubclass(ModuleLoadError, LoadError)

    def test_missing_handler_is_load_error(self) -> None:
        assert issubclass(MissingHandlerError, LoadError)

    def test_load_errors_are_distinct(self) -> None:
        assert not issubclass(MissingHandlerError, ModuleLoadError)
        assert not issubclass(ModuleLoadError, MissingHandlerError)


class TestMissingHandlerError:
    def test_default_message(self) -> None:
        assert str(MissingHandlerError()) == "Controller module missing the handler function"

    def test_custom_message(self) -> None:
        assert str(MissingHandlerError("no index")) == "no index"

    def test_catchable_as_load_error(self) -> None:
        with pytest.raises(LoadError):
            raise MissingHandlerError()


class TestModuleLoadError:
    def test_message(self) -> None:
        assert str(ModuleLoadError("No module named 'x'")) == "No module named 'x'"
