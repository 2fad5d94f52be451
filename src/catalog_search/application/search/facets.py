"""Application search – facet and stat planning."""
from __future__ import annotations

from catalog_search.application.search.errors import FieldNotFoundError
from catalog_search.application.search.ports import CategoryFacetProvider, FieldResolver
from catalog_search.application.search.query import EngineQuery, FieldRef
from catalog_search.config.settings import CatalogSearchSettings
from catalog_search.observability.logging import get_logger

CATEGORY_FIELD = "category_id"

_log = get_logger(__name__)


class FacetPlanner:
    """Chooses the facet and stat fields requested from the engine.

    Order: category-specific facets/stats (when a ``category_id`` filter is
    present), base stats, base facets, then the ``category_id`` facet which
    is always requested.
    """

    def __init__(
        self,
        fields: FieldResolver,
        category_facets: CategoryFacetProvider,
        settings: CatalogSearchSettings,
    ) -> None:
        self._fields = fields
        self._category_facets = category_facets
        self._settings = settings

    async def apply(self, query: EngineQuery) -> None:
        category_filter = query.get_filter(CATEGORY_FIELD)
        if category_filter is not None:
            category_id = category_filter.value
            query.add_facets(await self._category_facets.facet_fields_for(category_id))
            query.add_stats(await self._category_facets.stat_fields_for(category_id))

        for code in self._settings.base_stats:
            if (field := self._resolve(code)) is not None:
                query.add_stat(field)
        for code in self._settings.base_facets:
            if (field := self._resolve(code)) is not None:
                query.add_facet(field)

        if (field := self._resolve(CATEGORY_FIELD)) is not None:
            query.add_facet(field)

    def _resolve(self, code: str) -> FieldRef | None:
        try:
            field = self._fields.field_for(code)
        except FieldNotFoundError:
            field = None
        if field is None:
            _log.debug("catalog_search.facet.skipped", attribute_code=code)
        return field


__all__ = ["CATEGORY_FIELD", "FacetPlanner"]
