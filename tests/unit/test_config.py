"""Tests for configuration defaults and env overrides."""

from __future__ import annotations

from unittest.mock import patch

import pytest
from pydantic import ValidationError

from valuecast.core.config import EngineSettings, get_settings
from valuecast.core.logging import configure_logging


def test_default_settings():
    settings = EngineSettings()
    assert settings.pointer_width in (32, 64)
    assert settings.strict_symbol_separators is False
    assert settings.log_level == "INFO"


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("VALUECAST_POINTER_WIDTH", "32")
    monkeypatch.setenv("VALUECAST_STRICT_SYMBOL_SEPARATORS", "true")
    settings = EngineSettings()
    assert settings.pointer_width == 32
    assert settings.strict_symbol_separators is True


def test_rejects_unsupported_pointer_width():
    with pytest.raises(ValidationError):
        EngineSettings(pointer_width=16)


def test_settings_are_frozen():
    settings = EngineSettings()
    with pytest.raises(ValidationError):
        settings.pointer_width = 32


def test_get_settings_is_cached():
    assert get_settings() is get_settings()


def test_configure_logging_uses_configured_level():
    with patch("logging.basicConfig") as basic_config:
        configure_logging(EngineSettings(log_level="debug"))
    assert basic_config.call_args.kwargs["level"] == "DEBUG"
