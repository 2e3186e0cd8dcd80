"""Config – 12-factor settings and loaders."""

from searchlight.config.base import Settings
from searchlight.config.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader
from searchlight.config.settings import SearchlightSettings, configure, get_settings, reset_settings

__all__ = [
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "SearchlightSettings",
    "Settings",
    "SettingsLoader",
    "configure",
    "get_settings",
    "reset_settings",
]
