"""Config – SearchlightSettings and the process-wide settings slot."""
from __future__ import annotations

import dataclasses
from typing import ClassVar
import logging
import threading

from searchlight.config.base import Settings
from searchlight.config.loaders import EnvSettingsLoader, SettingsLoader
from searchlight.errors import InvalidSettingValueError

_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


@dataclasses.dataclass
class SearchlightSettings(Settings):
    """Library-wide settings, read from ``SEARCHLIGHT_*`` environment variables.

    Attributes:
        log_level: Level applied by :func:`~searchlight.observability.logging.configure_logging`.
        json_logs: Render log events as JSON instead of console key/values.
        guess_search_target: Let a class named ``<Name>Search`` without a
            ``search_on`` binding resolve ``<Name>`` from its defining module.
    """

    _prefix: ClassVar[str] = "SEARCHLIGHT"

    log_level: str = "WARNING"
    json_logs: bool = False
    guess_search_target: bool = False

    def _validate(self) -> None:
        self.log_level = self.log_level.upper()
        if self.log_level not in _LEVELS:
            raise InvalidSettingValueError(
                "log_level", self.log_level, f"expected one of {', '.join(_LEVELS)}"
            )

    @property
    def log_level_number(self) -> int:
        return logging.getLevelName(self.log_level)


_lock = threading.Lock()
_current: SearchlightSettings | None = None


def get_settings(loader: SettingsLoader | None = None) -> SearchlightSettings:
    """Return the active settings, loading them from the environment on first use."""
    global _current
    with _lock:
        if _current is None:
            _current = (loader or EnvSettingsLoader()).load(SearchlightSettings)
        return _current


def configure(settings: SearchlightSettings | None = None, **overrides: object) -> SearchlightSettings:
    """Install *settings* (or the current settings with *overrides* applied)."""
    global _current
    base = settings or get_settings()
    updated = dataclasses.replace(base, **overrides) if overrides else base
    with _lock:
        _current = updated
    return updated


def reset_settings() -> None:
    """Forget installed settings so the next access reloads them (useful in tests)."""
    global _current
    with _lock:
        _current = None


__all__ = ["SearchlightSettings", "configure", "get_settings", "reset_settings"]
