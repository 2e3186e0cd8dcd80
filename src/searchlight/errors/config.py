"""Configuration errors — settings loading and search target resolution."""

from __future__ import annotations

from searchlight.errors.base import SearchlightError


class ConfigError(SearchlightError):
    """Raised when configuration is invalid or loading failed."""

    default_code = "config_error"


class MissingSearchTarget(ConfigError):
    """No class in the search's ancestry bound a target with ``search_on``."""

    default_code = "missing_search_target"

    def __init__(self, search_class: type) -> None:
        super().__init__(
            "No search target provided via `search_on` and one could not be "
            f"guessed for {search_class.__name__}.",
            detail={"search_class": search_class.__qualname__},
        )
        self.search_class = search_class


class MissingRequiredSettingError(ConfigError):
    """A required environment variable / setting is absent."""

    default_code = "missing_required_setting"

    def __init__(self, setting_name: str) -> None:
        super().__init__(f"Required setting '{setting_name}' is missing")
        self.setting_name = setting_name


class InvalidSettingValueError(ConfigError):
    """A setting's value is present but semantically invalid."""

    default_code = "invalid_setting_value"

    def __init__(self, setting_name: str, value: object, reason: str) -> None:
        super().__init__(
            f"Setting '{setting_name}' has invalid value {value!r}: {reason}"
        )
        self.setting_name = setting_name
        self.value = value
        self.reason = reason


__all__ = [
    "ConfigError",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "MissingSearchTarget",
]
