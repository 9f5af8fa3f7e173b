"""Tests for configuration adapter."""

from pathlib import Path
from tempfile import NamedTemporaryFile

import pytest

from seestadtbot.adapters.config import AppConfig


def test_config_loads_defaults() -> None:
    """Given no environment variables, when loading config, then defaults are used."""
    config = AppConfig()

    assert config.log_level == "INFO"
    assert config.wienerlinien_monitor_url == "https://www.wienerlinien.at/ogd_realtime/monitor"
    assert config.wienerlinien_timeout == 7.5
    assert config.stadtkatalog_api_url == "https://api.stadtkatalog.org/v1"
    assert config.stadtkatalog_geofence == "seestadt"
    assert config.stadtkatalog_blacklist == []
    assert config.stadtkatalog_vague_terms == ["seestadt", "aspern"]
    assert config.timezone == "Europe/Vienna"
    assert config.config_file is None


def test_config_loads_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Given environment variables, when loading config, then they are used."""
    monkeypatch.setenv("LOG_LEVEL", "debug")
    monkeypatch.setenv("WIENERLINIEN_TIMEOUT", "3")
    monkeypatch.setenv("STADTKATALOG_BLACKLIST", '["abc", "def"]')

    config = AppConfig()

    assert config.log_level == "DEBUG"
    assert config.wienerlinien_timeout == 3.0
    assert config.stadtkatalog_blacklist == ["abc", "def"]


def test_config_validates_log_level(monkeypatch: pytest.MonkeyPatch) -> None:
    """Given an invalid log level, when loading config, then validation error is raised."""
    monkeypatch.setenv("LOG_LEVEL", "chatty")

    with pytest.raises(ValueError, match="log_level must be a logging level name"):
        AppConfig()


def test_config_validates_timezone(monkeypatch: pytest.MonkeyPatch) -> None:
    """Given an unknown timezone, when loading config, then validation error is raised."""
    monkeypatch.setenv("TIMEZONE", "Europe/Seestadt")

    with pytest.raises(ValueError, match="timezone must be an IANA timezone name"):
        AppConfig()


def test_load_toml_without_file_returns_empty() -> None:
    """Given no config file, when loading TOML, then nothing changes."""
    config = AppConfig()

    assert config.load_toml() == {}
    assert config.stadtkatalog_blacklist == []


def test_load_toml_applies_tables() -> None:
    """Given a TOML file, when loading it, then its tables override the settings."""
    toml_content = """
[wienerlinien]
monitor_url = "http://localhost:8080/monitor"
timeout = 2

[stadtkatalog]
geofence = "seestadt-nord"
blacklist = ["x1", 42]
vague_terms = ["see"]
"""
    with NamedTemporaryFile(mode="w", suffix=".toml", delete=False) as f:
        f.write(toml_content)
        temp_path = f.name

    try:
        config = AppConfig(config_file=temp_path)
        data = config.load_toml()

        assert "wienerlinien" in data
        assert config.wienerlinien_monitor_url == "http://localhost:8080/monitor"
        assert config.wienerlinien_timeout == 2.0
        assert config.stadtkatalog_geofence == "seestadt-nord"
        assert config.stadtkatalog_blacklist == ["x1", "42"]
        assert config.stadtkatalog_vague_terms == ["see"]
    finally:
        Path(temp_path).unlink()


def test_load_toml_rejects_non_list_blacklist() -> None:
    """Given a blacklist that is not a list, when loading TOML, then ValueError is raised."""
    with NamedTemporaryFile(mode="w", suffix=".toml", delete=False) as f:
        f.write('[stadtkatalog]\nblacklist = "x1"\n')
        temp_path = f.name

    try:
        with pytest.raises(ValueError, match="must be a list"):
            AppConfig(config_file=temp_path).load_toml()
    finally:
        Path(temp_path).unlink()


def test_load_toml_missing_file() -> None:
    """Given a missing config file, when loading TOML, then FileNotFoundError is raised."""
    config = AppConfig(config_file="/nonexistent/seestadtbot.toml")

    with pytest.raises(FileNotFoundError, match="Configuration file not found"):
        config.load_toml()
