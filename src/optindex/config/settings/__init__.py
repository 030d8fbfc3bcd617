"""Config settings – 12-factor env-based configuration."""
from optindex.config.settings.base import Settings
from optindex.config.settings.loaders import EnvSettingsLoader, SettingsLoader

__all__ = ["EnvSettingsLoader", "Settings", "SettingsLoader"]
