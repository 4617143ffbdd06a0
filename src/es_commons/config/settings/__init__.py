"""Config settings – 12-factor env-based configuration."""
from es_commons.config.settings.app import LoggingSettings, PublisherSettings
from es_commons.config.settings.base import Settings
from es_commons.config.settings.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader

__all__ = [
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "LoggingSettings",
    "PublisherSettings",
    "Settings",
    "SettingsLoader",
]
