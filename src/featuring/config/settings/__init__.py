"""Config settings – env-based configuration for featuring."""
from featuring.config.settings.base import Settings
from featuring.config.settings.featuring import FeaturingSettings
from featuring.config.settings.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader

__all__ = [
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "FeaturingSettings",
    "Settings",
    "SettingsLoader",
]
