"""Offer the library settings."""

from loom_data.settings.base_settings import LoomDataSettings, get_settings

__all__ = [
    "LoomDataSettings",
    "get_settings",
]
