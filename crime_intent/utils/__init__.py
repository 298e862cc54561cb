"""Shared helpers: environment settings."""

from .settings import Settings, get_settings, refresh_settings_cache

__all__ = ["Settings", "get_settings", "refresh_settings_cache"]
