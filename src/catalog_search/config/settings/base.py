"""Config settings – Settings base class."""
from __future__ import annotations

import dataclasses


@dataclasses.dataclass(frozen=True)
class Settings:
    """Immutable 12-factor settings read from ``{_prefix}_{FIELD}`` variables.

    Subclasses must be frozen dataclasses too; one instance is shared by
    every request a resolver serves.
    """

    _prefix: dataclasses.ClassVar[str] = ""

    @classmethod
    def env_key(cls, field_name: str) -> str:
        """``CatalogSearchSettings.env_key("store_id")`` -> ``CATALOG_SEARCH_STORE_ID``."""
        return f"{cls._prefix}_{field_name}".upper().lstrip("_")

    @classmethod
    def required_fields(cls) -> list[str]:
        return [
            f.name
            for f in dataclasses.fields(cls)
            if f.default is dataclasses.MISSING and f.default_factory is dataclasses.MISSING
        ]

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        """Raise ``InvalidSettingValueError`` for unusable values."""


__all__ = ["Settings"]
