"""Config – 12-factor settings and loaders."""

from gelf_logging.config.settings import EnvSettingsLoader, Settings, SettingsLoader
from gelf_logging.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

__all__ = [
    "ConfigError",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "Settings",
    "SettingsLoader",
]
