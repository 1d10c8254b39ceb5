"""Config – 12-factor settings and their validation errors."""
from holdyourhorses.config.settings import EnvSettingsLoader, Settings, SettingsLoader
from holdyourhorses.config.validation import ConfigError, InvalidSettingValueError

__all__ = [
    "ConfigError",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "Settings",
    "SettingsLoader",
]
