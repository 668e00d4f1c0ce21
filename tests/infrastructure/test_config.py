"""Settings — tests for environment-driven configuration."""

import pytest
from pydantic import ValidationError

from discussion.config import Settings, get_settings


def test_defaults_without_environment(monkeypatch):
    for name in ("DISCUSSION_LOG_LEVEL", "DISCUSSION_LOG_FORMAT", "DISCUSSION_DEFAULT_VIEWER"):
        monkeypatch.delenv(name, raising=False)
    settings = Settings(_env_file=None)
    assert settings.log_level == "INFO"
    assert settings.log_format == "text"
    assert settings.default_viewer == "guest"


def test_reads_prefixed_environment(monkeypatch):
    monkeypatch.setenv("DISCUSSION_LOG_FORMAT", " JSON ")
    monkeypatch.setenv("DISCUSSION_LOG_LEVEL", "debug")
    monkeypatch.setenv("DISCUSSION_DEFAULT_VIEWER", "alice")
    settings = Settings(_env_file=None)
    assert settings.log_format == "json"
    assert settings.log_level == "DEBUG"
    assert settings.default_viewer == "alice"


def test_rejects_unknown_log_format(monkeypatch):
    monkeypatch.setenv("DISCUSSION_LOG_FORMAT", "xml")
    with pytest.raises(ValidationError):
        Settings(_env_file=None)


def test_get_settings_is_cached():
    assert get_settings() is get_settings()
