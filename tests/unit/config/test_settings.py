"""Unit tests for config settings & validation."""

from dataclasses import dataclass, field
from typing import ClassVar

import pytest

from optindex.config.settings import EnvSettingsLoader, Settings
from optindex.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)
from optindex.kernel.errors import ApplicationError


# ---------------------------------------------------------------------------
# Concrete settings classes used across tests
# ---------------------------------------------------------------------------


@dataclass
class AppSettings(Settings):
    _prefix: ClassVar[str] = "APP"

    host: str = "localhost"
    port: int = 8080
    ratio: float = 0.5
    debug: bool = False
    allowed_origins: list[str] = field(default_factory=list)


@dataclass
class RequiredSettings(Settings):
    _prefix: ClassVar[str] = "REQ"

    token: str


@dataclass
class CheckedSettings(Settings):
    _prefix: ClassVar[str] = "CHK"

    limit: int = 1

    def _validate(self) -> None:
        if self.limit < 1:
            raise ValueError("limit must be positive")


# ---------------------------------------------------------------------------
# EnvSettingsLoader
# ---------------------------------------------------------------------------


class TestEnvSettingsLoader:
    def test_loads_string(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("APP_HOST", "example.com")
        settings = EnvSettingsLoader().load(AppSettings)
        assert settings.host == "example.com"

    def test_loads_int(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("APP_PORT", "9000")
        settings = EnvSettingsLoader().load(AppSettings)
        assert settings.port == 9000

    def test_loads_float(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("APP_RATIO", "0.25")
        assert EnvSettingsLoader().load(AppSettings).ratio == 0.25

    def test_loads_bool_true(self, monkeypatch: pytest.MonkeyPatch) -> None:
        for truthy in ("true", "True", "1", "yes", "on"):
            monkeypatch.setenv("APP_DEBUG", truthy)
            settings = EnvSettingsLoader().load(AppSettings)
            assert settings.debug is True

    def test_loads_bool_false(self, monkeypatch: pytest.MonkeyPatch) -> None:
        for falsy in ("false", "False", "0", "no", "off"):
            monkeypatch.setenv("APP_DEBUG", falsy)
            settings = EnvSettingsLoader().load(AppSettings)
            assert settings.debug is False

    def test_loads_list(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("APP_ALLOWED_ORIGINS", "http://a.com,http://b.com")
        settings = EnvSettingsLoader().load(AppSettings)
        assert settings.allowed_origins == ["http://a.com", "http://b.com"]

    def test_defaults_preserved_when_env_absent(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        for key in ("APP_HOST", "APP_PORT", "APP_RATIO", "APP_DEBUG", "APP_ALLOWED_ORIGINS"):
            monkeypatch.delenv(key, raising=False)
        settings = EnvSettingsLoader().load(AppSettings)
        assert settings.host == "localhost"
        assert settings.port == 8080
        assert settings.debug is False
        assert settings.allowed_origins == []

    def test_invalid_int_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("APP_PORT", "eighty")
        with pytest.raises(InvalidSettingValueError) as exc_info:
            EnvSettingsLoader().load(AppSettings)
        assert exc_info.value.setting_name == "APP_PORT"

    def test_invalid_bool_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("APP_DEBUG", "maybe")
        with pytest.raises(InvalidSettingValueError):
            EnvSettingsLoader().load(AppSettings)

    def test_missing_required_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("REQ_TOKEN", raising=False)
        with pytest.raises(MissingRequiredSettingError) as exc_info:
            EnvSettingsLoader().load(RequiredSettings)
        assert exc_info.value.setting_name == "REQ_TOKEN"

    def test_required_present(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("REQ_TOKEN", "abc")
        assert EnvSettingsLoader().load(RequiredSettings).token == "abc"

    def test_construction_failure_wrapped(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CHK_LIMIT", "0")
        with pytest.raises(ConfigError) as exc_info:
            EnvSettingsLoader().load(CheckedSettings)
        assert isinstance(exc_info.value.__cause__, ValueError)


class TestConfigErrors:
    def test_hierarchy(self) -> None:
        assert issubclass(ConfigError, ApplicationError)
        assert issubclass(MissingRequiredSettingError, ConfigError)
        assert issubclass(InvalidSettingValueError, ConfigError)

    def test_invalid_value_message(self) -> None:
        err = InvalidSettingValueError("APP_PORT", "x", "not an int")
        assert err.message == "APP_PORT='x' rejected: not an int"
        assert err.reason == "not an int"
        assert err.allowed == ()
        assert err.code == "invalid_setting_value"

    def test_invalid_value_lists_accepted_values(self) -> None:
        err = InvalidSettingValueError("APP_MODE", "z", "unknown mode", allowed=["a", "b"])
        assert err.message.endswith("(accepted: a, b)")
        assert err.detail == {"env_key": "APP_MODE", "value": "z", "allowed": ["a", "b"]}

    def test_missing_setting_message(self) -> None:
        err = MissingRequiredSettingError("REQ_TOKEN")
        assert err.message == "REQ_TOKEN must be set"
        assert err.detail == {"env_key": "REQ_TOKEN"}
