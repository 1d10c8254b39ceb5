"""Config settings – 12-factor env-based configuration."""
from holdyourhorses.config.settings.base import Settings
from holdyourhorses.config.settings.loaders import EnvSettingsLoader, SettingsLoader

__all__ = ["EnvSettingsLoader", "Settings", "SettingsLoader"]
