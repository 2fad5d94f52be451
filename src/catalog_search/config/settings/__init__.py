"""Config settings – 12-factor env-based configuration."""
from catalog_search.config.settings.base import Settings
from catalog_search.config.settings.catalog import CatalogSearchSettings
from catalog_search.config.settings.factory import SettingsFactory
from catalog_search.config.settings.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader

__all__ = [
    "CatalogSearchSettings",
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "Settings",
    "SettingsFactory",
    "SettingsLoader",
]
