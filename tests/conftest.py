"""Shared fixtures: isolate settings from the host environment."""

from __future__ import annotations

import pytest

from valuecast.core.config import EngineSettings, get_settings


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    for name in ("VALUECAST_POINTER_WIDTH", "VALUECAST_STRICT_SYMBOL_SEPARATORS", "VALUECAST_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def settings_32():
    return EngineSettings(pointer_width=32)


@pytest.fixture
def settings_64():
    return EngineSettings(pointer_width=64)


@pytest.fixture
def strict_settings():
    return EngineSettings(strict_symbol_separators=True)
