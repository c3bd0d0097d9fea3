"""Config – 12-factor settings and loaders."""

from reqlog.config.settings import DotenvSettingsLoader, EnvSettingsLoader, Settings, SettingsLoader
from reqlog.config.validation import ConfigError, InvalidSettingValueError

__all__ = [
    "ConfigError",
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "Settings",
    "SettingsLoader",
]
