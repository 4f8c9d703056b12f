from pathlib import Path

import pytest
from pydantic import ValidationError

from slimlog.config import LoggingSettings, LogLevel
from slimlog.core import Logger
from slimlog.levels import Level
from slimlog.sinks import FileSink, StreamSink


def test_defaults(monkeypatch: pytest.MonkeyPatch):
    """Defaults match a freshly constructed Logger."""
    for name in ("SLIMLOG_LEVEL", "SLIMLOG_TIME", "SLIMLOG_FILE_PATH"):
        monkeypatch.delenv(name, raising=False)
    settings = LoggingSettings()
    assert settings.level is LogLevel.ERROR
    assert settings.time is True
    assert settings.file_path is None


def test_environment_overrides(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("SLIMLOG_LEVEL", "INFO")
    monkeypatch.setenv("SLIMLOG_TIME", "false")
    monkeypatch.setenv("SLIMLOG_FILE_PATH", "/var/log/app.log")
    settings = LoggingSettings()
    assert settings.level is LogLevel.INFO
    assert settings.time is False
    assert settings.file_path == "/var/log/app.log"


def test_invalid_level_rejected():
    with pytest.raises(ValidationError):
        LoggingSettings(level="WARNING")


def test_settings_are_frozen():
    settings = LoggingSettings()
    with pytest.raises(ValidationError):
        settings.time = False


def test_logger_from_settings_file(tmp_path: Path):
    path = tmp_path / "logs" / "svc.log"
    log = Logger.from_settings(LoggingSettings(level="DEBUG", time=False, file_path=str(path)))
    try:
        assert isinstance(log.sink, FileSink)
        assert log.level == Level.DEBUG
        assert log.time is False
        log.debugf("hello")
    finally:
        log.close()
    assert path.read_text().startswith(". ")


def test_logger_from_settings_stderr(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.delenv("SLIMLOG_FILE_PATH", raising=False)
    log = Logger.from_settings(LoggingSettings(file_path=None))
    assert isinstance(log.sink, StreamSink)
    log.close()
