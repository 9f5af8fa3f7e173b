"""12-factor configuration adapter using environment variables and TOML config."""

import logging
import tomllib
from pathlib import Path
from typing import Any
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppConfig(BaseSettings):
    """Application configuration following 12-factor principles."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Logging
    log_level: str = Field(default="INFO", description="Log level for the root logger")

    # Wiener Linien real-time API
    wienerlinien_monitor_url: str = Field(
        default="https://www.wienerlinien.at/ogd_realtime/monitor",
        description="The Wiener Linien real-time monitor endpoint",
    )
    wienerlinien_elevator_url: str = Field(
        default="https://www.wienerlinien.at/ogd_realtime/trafficInfoList?name=aufzugsinfo",
        description="The Wiener Linien elevator info endpoint",
    )
    wienerlinien_timeout: float = Field(
        default=7.5, description="Timeout for Wiener Linien API requests in seconds"
    )

    # StadtKatalog API
    stadtkatalog_api_url: str = Field(
        default="https://api.stadtkatalog.org/v1",
        description="Base URL of the StadtKatalog open data REST API",
    )
    stadtkatalog_timeout: float = Field(
        default=5.0, description="Timeout for StadtKatalog API requests in seconds"
    )
    stadtkatalog_geofence: str = Field(
        default="seestadt", description="Geo fence restricting StadtKatalog searches"
    )
    stadtkatalog_blacklist: list[str] = Field(
        default_factory=list,
        description="IDs of StadtKatalog entries to filter from voice-based results",
    )
    stadtkatalog_vague_terms: list[str] = Field(
        default_factory=lambda: ["seestadt", "aspern"],
        description="Too vague terms which should not be used for search queries",
    )

    timezone: str = Field(
        default="Europe/Vienna",
        description="Timezone of the shops for opening hours (IANA timezone name)",
    )

    # TOML config file path (optional)
    config_file: str | None = Field(
        default=None,
        description="Path to TOML configuration file with [wienerlinien] and [stadtkatalog] tables",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is a known logging level name."""
        level = v.upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"log_level must be a logging level name, got '{v}'")
        return level

    @field_validator("timezone")
    @classmethod
    def validate_timezone(cls, v: str) -> str:
        """Validate timezone is a known IANA timezone."""
        try:
            ZoneInfo(v)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ValueError(f"timezone must be an IANA timezone name: {e}") from e
        return v

    def load_toml(self) -> dict[str, Any]:
        """Load the TOML file and apply its [wienerlinien] and [stadtkatalog] tables.

        Returns the parsed TOML data, or an empty dict if no config_file is set.

        Raises:
            FileNotFoundError: If config_file is set but does not exist.
        """
        if not self.config_file:
            return {}

        config_path = Path(self.config_file)
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        with open(config_path, "rb") as f:
            toml_data = tomllib.load(f)

        wienerlinien = toml_data.get("wienerlinien", {})
        if "monitor_url" in wienerlinien:
            self.wienerlinien_monitor_url = wienerlinien["monitor_url"]
        if "elevator_url" in wienerlinien:
            self.wienerlinien_elevator_url = wienerlinien["elevator_url"]
        if "timeout" in wienerlinien:
            self.wienerlinien_timeout = float(wienerlinien["timeout"])

        stadtkatalog = toml_data.get("stadtkatalog", {})
        if "api_url" in stadtkatalog:
            self.stadtkatalog_api_url = stadtkatalog["api_url"]
        if "geofence" in stadtkatalog:
            self.stadtkatalog_geofence = stadtkatalog["geofence"]
        if "blacklist" in stadtkatalog:
            blacklist = stadtkatalog["blacklist"]
            if not isinstance(blacklist, list):
                raise ValueError("TOML config 'stadtkatalog.blacklist' must be a list")
            self.stadtkatalog_blacklist = [str(entry_id) for entry_id in blacklist]
        if "vague_terms" in stadtkatalog:
            vague_terms = stadtkatalog["vague_terms"]
            if not isinstance(vague_terms, list):
                raise ValueError("TOML config 'stadtkatalog.vague_terms' must be a list")
            self.stadtkatalog_vague_terms = [str(term) for term in vague_terms]

        return toml_data
