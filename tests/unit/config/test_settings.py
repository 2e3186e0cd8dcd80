"""Unit tests for searchlight settings and loaders."""

import dataclasses
from pathlib import Path
from typing import Iterator

import pytest

from searchlight.config import (
    DotenvSettingsLoader,
    EnvSettingsLoader,
    SearchlightSettings,
    Settings,
    configure,
    get_settings,
    reset_settings,
)
from searchlight.errors import ConfigError, InvalidSettingValueError, MissingRequiredSettingError


@pytest.fixture(autouse=True)
def _fresh_settings() -> Iterator[None]:
    reset_settings()
    yield
    reset_settings()


@dataclasses.dataclass
class _RequiredSettings(Settings):
    _prefix = "app"

    dsn: str
    page_size: int = 10

    def _validate(self) -> None:
        if self.page_size <= 0:
            raise ValueError("page_size must be positive")


class TestSettingsBase:
    def test_env_key_uses_prefix(self) -> None:
        assert SearchlightSettings.env_key("log_level") == "SEARCHLIGHT_LOG_LEVEL"
        assert _RequiredSettings.env_key("dsn") == "APP_DSN"

    def test_env_key_without_prefix(self) -> None:
        assert Settings.env_key("log_level") == "LOG_LEVEL"


# ---------------------------------------------------------------------------
# SearchlightSettings
# ---------------------------------------------------------------------------


class TestSearchlightSettings:
    def test_defaults(self) -> None:
        settings = SearchlightSettings()
        assert settings.log_level == "WARNING"
        assert settings.json_logs is False
        assert settings.guess_search_target is False

    def test_log_level_normalised(self) -> None:
        assert SearchlightSettings(log_level="debug").log_level == "DEBUG"

    def test_log_level_number(self) -> None:
        assert SearchlightSettings(log_level="INFO").log_level_number == 20

    def test_rejects_unknown_log_level(self) -> None:
        with pytest.raises(InvalidSettingValueError) as exc_info:
            SearchlightSettings(log_level="LOUD")
        assert exc_info.value.setting_name == "log_level"
        assert isinstance(exc_info.value, ConfigError)


# ---------------------------------------------------------------------------
# EnvSettingsLoader
# ---------------------------------------------------------------------------


class TestEnvSettingsLoader:
    def test_reads_prefixed_variables(self) -> None:
        env = {
            "SEARCHLIGHT_LOG_LEVEL": "info",
            "SEARCHLIGHT_JSON_LOGS": "true",
            "SEARCHLIGHT_GUESS_SEARCH_TARGET": "1",
        }
        settings = EnvSettingsLoader(env).load(SearchlightSettings)
        assert settings.log_level == "INFO"
        assert settings.json_logs is True
        assert settings.guess_search_target is True

    @pytest.mark.parametrize("falsy", ["false", "0", "no", "off", ""])
    def test_bool_false(self, falsy: str) -> None:
        settings = EnvSettingsLoader({"SEARCHLIGHT_JSON_LOGS": falsy}).load(SearchlightSettings)
        assert settings.json_logs is False

    def test_defaults_when_absent(self) -> None:
        settings = EnvSettingsLoader({}).load(SearchlightSettings)
        assert settings == SearchlightSettings()

    def test_os_environ(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SEARCHLIGHT_LOG_LEVEL", "ERROR")
        assert EnvSettingsLoader().load(SearchlightSettings).log_level == "ERROR"

    def test_invalid_value_keeps_its_error_type(self) -> None:
        with pytest.raises(InvalidSettingValueError):
            EnvSettingsLoader({"SEARCHLIGHT_LOG_LEVEL": "LOUD"}).load(SearchlightSettings)

    def test_required_field_missing(self) -> None:
        with pytest.raises(MissingRequiredSettingError) as exc_info:
            EnvSettingsLoader({}).load(_RequiredSettings)
        assert "APP_DSN" in str(exc_info.value)

    def test_required_field_present(self) -> None:
        settings = EnvSettingsLoader({"APP_DSN": "sqlite://"}).load(_RequiredSettings)
        assert settings.dsn == "sqlite://"
        assert settings.page_size == 10

    def test_other_failures_chained_as_config_error(self) -> None:
        with pytest.raises(ConfigError) as exc_info:
            EnvSettingsLoader({"APP_DSN": "sqlite://", "APP_PAGE_SIZE": "0"}).load(_RequiredSettings)
        assert type(exc_info.value) is ConfigError
        assert isinstance(exc_info.value.__cause__, ValueError)


class TestDotenvSettingsLoader:
    def test_loads_env_file(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("SEARCHLIGHT_GUESS_SEARCH_TARGET", raising=False)
        env_file = tmp_path / ".env"
        env_file.write_text("SEARCHLIGHT_GUESS_SEARCH_TARGET=yes\n")
        try:
            settings = DotenvSettingsLoader(str(env_file)).load(SearchlightSettings)
        finally:
            monkeypatch.delenv("SEARCHLIGHT_GUESS_SEARCH_TARGET", raising=False)
        assert settings.guess_search_target is True


# ---------------------------------------------------------------------------
# Process-wide settings
# ---------------------------------------------------------------------------


class TestSettingsSlot:
    def test_get_settings_is_cached(self) -> None:
        assert get_settings() is get_settings()

    def test_get_settings_uses_loader_once(self) -> None:
        env = {"SEARCHLIGHT_LOG_LEVEL": "DEBUG"}
        assert get_settings(EnvSettingsLoader(env)).log_level == "DEBUG"
        assert get_settings().log_level == "DEBUG"

    def test_configure_overrides(self) -> None:
        configure(guess_search_target=True)
        assert get_settings().guess_search_target is True

    def test_configure_explicit_settings(self) -> None:
        settings = SearchlightSettings(json_logs=True)
        assert configure(settings) is settings
        assert get_settings() is settings

    def test_configure_validates_overrides(self) -> None:
        with pytest.raises(InvalidSettingValueError):
            configure(log_level="LOUD")

    def test_reset_reloads(self) -> None:
        configure(json_logs=True)
        reset_settings()
        assert get_settings(EnvSettingsLoader({})).json_logs is False
