"""Config validation errors.

Every error names the environment variable at fault (``EVENTS_TOPICS``,
``LOG_LEVEL``, …) so a misconfigured deployment can be fixed without reading
the settings classes.
"""
from __future__ import annotations

from es_commons.kernel.errors import ApplicationError


class ConfigError(ApplicationError):
    """Settings could not be loaded or failed validation."""
    default_code = "config_error"


class MissingRequiredSettingError(ConfigError):
    """A settings field without default has no environment variable."""
    default_code = "missing_required_setting"

    def __init__(self, env_key: str, *, settings: str | None = None) -> None:
        where = f" (required by {settings})" if settings else ""
        super().__init__(
            f"Environment variable {env_key} is not set{where}",
            detail={"env_key": env_key, "settings": settings},
        )
        self.env_key = env_key
        self.settings = settings


class InvalidSettingValueError(ConfigError):
    """An environment variable is set but its value is unusable."""
    default_code = "invalid_setting_value"

    def __init__(
        self,
        env_key: str,
        value: object,
        reason: str,
        *,
        settings: str | None = None,
    ) -> None:
        super().__init__(
            f"{env_key}={value!r} is invalid: {reason}",
            detail={"env_key": env_key, "reason": reason, "settings": settings},
        )
        self.env_key = env_key
        self.value = value
        self.reason = reason
        self.settings = settings


__all__ = ["ConfigError", "InvalidSettingValueError", "MissingRequiredSettingError"]
