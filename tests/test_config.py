"""Settings — environment-driven configuration."""

import pytest
from pydantic import ValidationError

from fireworks.config import Settings, get_settings


def test_defaults_without_environment(monkeypatch):
    monkeypatch.delenv("FIREWORKS_LOG_LEVEL", raising=False)
    monkeypatch.delenv("FIREWORKS_LOG_FORMAT", raising=False)
    settings = Settings(_env_file=None)
    assert settings.log_level == "INFO"
    assert settings.log_format == "text"


def test_log_level_normalized_from_environment(monkeypatch):
    monkeypatch.setenv("FIREWORKS_LOG_LEVEL", " debug ")
    assert Settings(_env_file=None).log_level == "DEBUG"


def test_log_format_restricted(monkeypatch):
    monkeypatch.setenv("FIREWORKS_LOG_FORMAT", "xml")
    with pytest.raises(ValidationError):
        Settings(_env_file=None)


def test_get_settings_is_cached():
    assert get_settings() is get_settings()
