"""Config settings – SettingsFactory."""
from __future__ import annotations

import dataclasses
from typing import Any, Sequence, TypeVar

from catalog_search.config.settings.base import Settings
from catalog_search.config.settings.loaders import SettingsLoader
from catalog_search.config.validation.errors import ConfigError, MissingRequiredSettingError

T = TypeVar("T", bound=Settings)


class SettingsFactory:
    """Layer several settings sources into one instance.

    Usage::

        settings = SettingsFactory.create(
            CatalogSearchSettings,
            loaders=[DotenvSettingsLoader(), EnvSettingsLoader()],
            overrides={"spellcheck_enabled": True},
        )
    """

    @staticmethod
    def create(
        settings_cls: type[T],
        loaders: Sequence[SettingsLoader] | None = None,
        overrides: dict[str, Any] | None = None,
    ) -> T:
        """Build *settings_cls* from *loaders* (later wins) and *overrides* (highest).

        A loader raising :class:`ConfigError` contributes nothing. Raises
        :class:`MissingRequiredSettingError` when a required field is still
        unset, and :class:`ConfigError` for any other construction failure.
        """
        values: dict[str, Any] = {}
        for loader in loaders or ():
            try:
                loaded = loader.load(settings_cls)
            except ConfigError:
                continue
            values.update({f.name: getattr(loaded, f.name) for f in dataclasses.fields(loaded)})
        values.update(overrides or {})

        missing = [name for name in settings_cls.required_fields() if name not in values]
        if missing:
            raise MissingRequiredSettingError(missing[0])

        try:
            return settings_cls(**values)
        except ConfigError:
            raise
        except Exception as exc:
            raise ConfigError(f"Failed to construct {settings_cls.__name__}: {exc}") from exc


__all__ = ["SettingsFactory"]
