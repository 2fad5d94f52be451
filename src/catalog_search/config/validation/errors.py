"""Config validation – errors raised while loading or checking settings."""
from __future__ import annotations

from catalog_search.kernel.errors import ApplicationError


class ConfigError(ApplicationError):
    """Settings could not be loaded, or a configured value cannot be used."""

    default_code = "config_error"


class MissingRequiredSettingError(ConfigError):
    default_code = "missing_required_setting"

    def __init__(self, setting_name: str) -> None:
        super().__init__(f"Required setting '{setting_name}' is missing")
        self.setting_name = setting_name


class InvalidSettingValueError(ConfigError):
    """``setting_name`` holds *value*, which fails the check described by *reason*."""

    default_code = "invalid_setting_value"

    def __init__(self, setting_name: str, value: object, reason: str) -> None:
        super().__init__(f"Setting '{setting_name}' has invalid value {value!r}: {reason}")
        self.setting_name = setting_name
        self.value = value
        self.reason = reason


__all__ = ["ConfigError", "InvalidSettingValueError", "MissingRequiredSettingError"]
