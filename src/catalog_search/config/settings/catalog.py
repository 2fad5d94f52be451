"""Config settings – CatalogSearchSettings."""
from __future__ import annotations

import dataclasses

from catalog_search.config.settings.base import Settings
from catalog_search.config.validation import InvalidSettingValueError


@dataclasses.dataclass(frozen=True)
class CatalogSearchSettings(Settings):
    """Static configuration read by the products resolver.

    Environment variables use the ``CATALOG_SEARCH_`` prefix, e.g.
    ``CATALOG_SEARCH_SPELLCHECK_ENABLED=1`` or
    ``CATALOG_SEARCH_BASE_FACETS=brand,color``.
    """

    _prefix: dataclasses.ClassVar[str] = "CATALOG_SEARCH"

    spellcheck_enabled: bool = False
    show_out_of_stock: bool = False
    search_query_boost: str = ""
    base_stats: tuple[str, ...] = ()
    base_facets: tuple[str, ...] = ()
    store_id: str = "1"
    identifier_field: str = "sku"
    identifiers_page_size: int = 50000
    # TODO: derive from the listing's maximum page size once it is configurable
    full_page_size: int = 100
    spellcheck_max_variants: int = 10

    def _validate(self) -> None:
        for name in ("identifiers_page_size", "full_page_size", "spellcheck_max_variants"):
            value = getattr(self, name)
            if value <= 0:
                raise InvalidSettingValueError(name, value, "must be a positive integer")
        if not self.identifier_field:
            raise InvalidSettingValueError("identifier_field", self.identifier_field, "must not be empty")


__all__ = ["CatalogSearchSettings"]
