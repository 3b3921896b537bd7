import pytest
from pydantic import ValidationError

from echolog.config import LogFormat, LogLevel, settings


def test_default_settings():
    """Defaults keep files strict UTF-8 and diagnostics quiet."""
    assert settings.output.encoding == "utf-8"
    assert settings.output.errors == "strict"
    assert settings.output.flush is False
    assert settings.output.create_parent_dirs is False
    assert settings.logging.level == LogLevel.WARNING
    assert settings.logging.sinks == "stdio"
    assert settings.logging.format == LogFormat.CONSOLE


def test_env_overrides(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("ECHOLOG_OUTPUT_ENCODING", "latin-1")
    monkeypatch.setenv("ECHOLOG_LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("ECHOLOG_LOG_FORMAT", "json")
    settings.reload()

    assert settings.output.encoding == "latin-1"
    assert settings.logging.level == LogLevel.DEBUG
    assert settings.logging.format == LogFormat.JSON


def test_sub_settings_are_cached_until_reload(monkeypatch: pytest.MonkeyPatch):
    first = settings.output
    monkeypatch.setenv("ECHOLOG_OUTPUT_FLUSH", "true")
    assert settings.output is first

    settings.reload()
    assert settings.output is not first
    assert settings.output.flush is True


def test_settings_are_frozen():
    with pytest.raises(ValidationError):
        settings.output.encoding = "ascii"


def test_invalid_level_rejected(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("ECHOLOG_LOG_LEVEL", "LOUD")
    settings.reload()
    with pytest.raises(ValidationError):
        settings.logging
