"""Config – 12-factor settings, loaders, and validation errors."""

from optindex.config.settings import EnvSettingsLoader, Settings, SettingsLoader
from optindex.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

__all__ = [
    "ConfigError",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "Settings",
    "SettingsLoader",
]
