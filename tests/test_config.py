"""Tests for settings."""

import pytest
from pydantic import ValidationError

from src.config import (
    LITTLE_HOTELIER_BASE_URL,
    AppSettings,
    CorsSettings,
    LittleHotelierSettings,
    Settings,
)


def test_defaults():
    """Test the fixed property and listen address."""
    settings = Settings()

    assert settings.little_hotelier_base_url == LITTLE_HOTELIER_BASE_URL
    assert settings.app.host == "0.0.0.0"
    assert settings.app.port == 8080
    assert settings.cors.allowed_methods == ["GET", "POST", "OPTIONS"]
    assert settings.cors.allow_credentials is False
    assert len(settings.cors.allowed_origins) == 3


def test_env_override(monkeypatch):
    """Test LITTLE_HOTELIER_ variables override defaults."""
    monkeypatch.setenv("LITTLE_HOTELIER_BASE_URL", "http://localhost:9000/rates.json")
    monkeypatch.setenv("LITTLE_HOTELIER_TIMEOUT_SECONDS", "2.5")

    settings = LittleHotelierSettings()

    assert settings.base_url == "http://localhost:9000/rates.json"
    assert settings.timeout_seconds == 2.5


def test_cors_origins_from_env(monkeypatch):
    """Test origins are read as a JSON list."""
    monkeypatch.setenv("CORS_ALLOWED_ORIGINS", '["http://localhost:3000/"]')

    assert CorsSettings().allowed_origins == ["http://localhost:3000"]


def test_invalid_port():
    """Test out-of-range ports are rejected."""
    with pytest.raises(ValidationError):
        AppSettings(port=70000)


def test_settings_are_frozen():
    """Test settings cannot change after startup."""
    settings = LittleHotelierSettings()

    with pytest.raises(ValidationError):
        settings.base_url = "http://elsewhere"
