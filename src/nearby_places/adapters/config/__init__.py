"""Configuration adapters."""

from nearby_places.adapters.config.app_config import AppConfig

__all__ = ["AppConfig"]
