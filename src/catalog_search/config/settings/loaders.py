"""Config settings – EnvSettingsLoader, DotenvSettingsLoader."""
from __future__ import annotations

import abc
import dataclasses
import os
from typing import Any, TypeVar

from dotenv import load_dotenv

from catalog_search.config.settings.base import Settings
from catalog_search.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

T = TypeVar("T", bound=Settings)

_TRUTHY = frozenset({"1", "true", "yes", "on"})


def _type_name(type_hint: Any) -> str:
    # modules using ``from __future__ import annotations`` store hints as strings
    if isinstance(type_hint, str):
        return type_hint.replace(" ", "")
    origin = getattr(type_hint, "__origin__", None)
    return getattr(origin or type_hint, "__name__", "")


def coerce_env_value(raw: str, type_hint: Any) -> Any:
    """Convert an environment string to the field's declared type.

    Sequences are comma-separated: ``"brand, color"`` -> ``("brand", "color")``
    for a ``tuple[str, ...]`` field. Raises ``ValueError`` for malformed numbers.
    """
    name = _type_name(type_hint)
    if name == "bool":
        return raw.strip().lower() in _TRUTHY
    if name == "int":
        return int(raw)
    if name == "float":
        return float(raw)
    if name.startswith(("list", "tuple")):
        items = [item.strip() for item in raw.split(",") if item.strip()]
        return tuple(items) if name.startswith("tuple") else items
    return raw


class SettingsLoader(abc.ABC):
    """Port: build a settings instance from one source."""

    @abc.abstractmethod
    def load(self, settings_class: type[T]) -> T: ...


class EnvSettingsLoader(SettingsLoader):
    """Reads ``{PREFIX}_{FIELD}`` variables from ``os.environ``.

    Absent variables keep the field default; a required field without a
    variable raises :class:`MissingRequiredSettingError`.
    """

    def load(self, settings_class: type[T]) -> T:
        kwargs: dict[str, Any] = {}
        required = set(settings_class.required_fields())
        for field in dataclasses.fields(settings_class):  # type: ignore[arg-type]
            env_key = settings_class.env_key(field.name)
            raw = os.environ.get(env_key)
            if raw is None:
                if field.name in required:
                    raise MissingRequiredSettingError(env_key)
                continue
            try:
                kwargs[field.name] = coerce_env_value(raw, field.type)
            except ValueError as exc:
                raise InvalidSettingValueError(env_key, raw, str(exc)) from exc

        try:
            return settings_class(**kwargs)
        except ConfigError:
            raise
        except Exception as exc:
            raise ConfigError(f"Failed to load {settings_class.__name__} from environment: {exc}") from exc


class DotenvSettingsLoader(SettingsLoader):
    """Loads a ``.env`` file into the environment, then reads it like :class:`EnvSettingsLoader`.

    Variables already set in the process win unless *override* is true.
    """

    def __init__(self, env_file: str = ".env", override: bool = False) -> None:
        self._env_file = env_file
        self._override = override

    def load(self, settings_class: type[T]) -> T:
        load_dotenv(self._env_file, override=self._override)
        return EnvSettingsLoader().load(settings_class)


__all__ = ["DotenvSettingsLoader", "EnvSettingsLoader", "SettingsLoader", "coerce_env_value"]
