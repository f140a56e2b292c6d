"""Tests for environment-driven settings."""

import pytest

from system_info.config import Settings, get_settings


@pytest.fixture(autouse=True)
def clear_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def test_defaults(monkeypatch):
    for name in ("SYSTEM_INFO_HOST", "SYSTEM_INFO_PORT", "SYSTEM_INFO_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)

    assert get_settings() == Settings(host="0.0.0.0", port=8080, log_level="info")


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("SYSTEM_INFO_HOST", "127.0.0.1")
    monkeypatch.setenv("SYSTEM_INFO_PORT", "9100")
    monkeypatch.setenv("SYSTEM_INFO_LOG_LEVEL", "DEBUG")

    assert get_settings() == Settings(host="127.0.0.1", port=9100, log_level="debug")
