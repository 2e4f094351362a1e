"""Configuration adapters."""

from gamp.adapters.config.app_config import AppConfig

__all__ = ["AppConfig"]
