"""Config settings – 12-factor env-based configuration."""
from gelf_logging.config.settings.base import Settings
from gelf_logging.config.settings.loaders import EnvSettingsLoader, SettingsLoader

__all__ = ["EnvSettingsLoader", "Settings", "SettingsLoader"]
