"""Config settings – 12-factor env-based configuration."""
from resource_cache.config.settings.base import Settings
from resource_cache.config.settings.cache import CacheSettings
from resource_cache.config.settings.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader

__all__ = ["CacheSettings", "DotenvSettingsLoader", "EnvSettingsLoader", "Settings", "SettingsLoader"]
