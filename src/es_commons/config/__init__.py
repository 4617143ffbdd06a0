"""Config – 12-factor settings and loaders."""

from es_commons.config.settings import (
    EnvSettingsLoader,
    LoggingSettings,
    PublisherSettings,
    Settings,
    SettingsLoader,
)
from es_commons.config.validation import ConfigError, MissingRequiredSettingError

__all__ = [
    "ConfigError",
    "EnvSettingsLoader",
    "LoggingSettings",
    "MissingRequiredSettingError",
    "PublisherSettings",
    "Settings",
    "SettingsLoader",
]
