"""Configuration adapters."""

from seestadtbot.adapters.config.app_config import AppConfig

__all__ = ["AppConfig"]
