"""Tests for SpotifySettings."""

import pytest

from spotify_web.constants import DEFAULT_REQUEST_TIMEOUT, SPOTIFY_API_BASE
from spotify_web.settings import SpotifySettings, get_settings


def test_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    """Settings have sensible defaults."""
    for name in ("SPOTIFY_ACCESS_TOKEN", "SPOTIFY_API_BASE", "SPOTIFY_REQUEST_TIMEOUT", "LOG_LEVEL", "LOG_JSON"):
        monkeypatch.delenv(name, raising=False)

    settings = SpotifySettings()
    assert settings.SPOTIFY_ACCESS_TOKEN == ""
    assert settings.SPOTIFY_API_BASE == SPOTIFY_API_BASE
    assert settings.SPOTIFY_REQUEST_TIMEOUT == DEFAULT_REQUEST_TIMEOUT
    assert settings.LOG_LEVEL == "INFO"
    assert settings.LOG_JSON is True


def test_env_override(monkeypatch: pytest.MonkeyPatch) -> None:
    """Settings can be overridden via environment variables."""
    monkeypatch.setenv("SPOTIFY_ACCESS_TOKEN", "env-token")
    monkeypatch.setenv("SPOTIFY_REQUEST_TIMEOUT", "5.5")
    monkeypatch.setenv("LOG_JSON", "false")

    settings = SpotifySettings()
    assert settings.SPOTIFY_ACCESS_TOKEN == "env-token"
    assert settings.SPOTIFY_REQUEST_TIMEOUT == 5.5
    assert settings.LOG_JSON is False


def test_get_settings_is_cached(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SPOTIFY_ACCESS_TOKEN", "first")
    first = get_settings()
    monkeypatch.setenv("SPOTIFY_ACCESS_TOKEN", "second")
    assert get_settings() is first
    assert get_settings().SPOTIFY_ACCESS_TOKEN == "first"
