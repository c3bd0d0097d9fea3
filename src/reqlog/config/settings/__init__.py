"""Config settings – 12-factor env-based configuration."""
from reqlog.config.settings.base import Settings
from reqlog.config.settings.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader

__all__ = ["DotenvSettingsLoader", "EnvSettingsLoader", "Settings", "SettingsLoader"]
