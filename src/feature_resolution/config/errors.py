"""Errors raised while loading resolver settings."""
from feature_resolution.kernel.errors import ApplicationError


class ConfigError(ApplicationError):
    """Resolver settings could not be loaded."""
    default_code = "config_error"


class SettingError(ConfigError):
    """One named setting (a field or its environment variable) is unusable."""

    def __init__(self, setting_name: str, problem: str, **kwargs: object) -> None:
        super().__init__(f"{setting_name}: {problem}", **kwargs)
        self.setting_name = setting_name


class MissingRequiredSettingError(SettingError):
    default_code = "missing_required_setting"

    def __init__(self, setting_name: str) -> None:
        super().__init__(setting_name, "not set and has no default")


class InvalidSettingValueError(SettingError):
    default_code = "invalid_setting_value"

    def __init__(self, setting_name: str, value: object, reason: str) -> None:
        super().__init__(setting_name, f"{value!r} is not usable, {reason}", detail={"value": value})
        self.value = value
        self.reason = reason


__all__ = ["ConfigError", "InvalidSettingValueError", "MissingRequiredSettingError", "SettingError"]
