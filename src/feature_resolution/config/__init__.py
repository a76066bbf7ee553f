"""Config – env-based settings and configuration errors."""
from feature_resolution.config.errors import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
    SettingError,
)
from feature_resolution.config.settings import (
    DotenvSettingsLoader,
    EnvSettingsLoader,
    Settings,
    SettingsLoader,
)

__all__ = [
    "ConfigError",
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "SettingError",
    "Settings",
    "SettingsLoader",
]
