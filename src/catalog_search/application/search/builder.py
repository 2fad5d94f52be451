"""Application search – QueryBuilder orchestrating the translators."""
from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from catalog_search.application.search.execution import PreparedQuery, QueryExecutor
from catalog_search.application.search.facets import FacetPlanner
from catalog_search.application.search.filters import FilterTranslator
from catalog_search.application.search.hooks import Hooks
from catalog_search.application.search.ports import CategoryFacetProvider, EngineClient, FieldResolver
from catalog_search.application.search.selection import FieldPlan, FieldSelectionPlanner
from catalog_search.application.search.sort import SortTranslator
from catalog_search.application.search.text import parse_search_text
from catalog_search.config.settings import CatalogSearchSettings
from catalog_search.observability.logging import get_logger

_log = get_logger(__name__)

#: Plan used for spellcheck trial queries and other count-only probes.
IDENTIFIERS_ONLY = FieldPlan(identifiers_only=True)


class QueryBuilder:
    """Composes filters, sort, facets/stats, selection and free text into one query.

    The builder holds only immutable collaborators and configuration, so one
    instance can serve concurrent requests; each call returns a fresh query.
    """

    def __init__(
        self,
        client: EngineClient,
        fields: FieldResolver,
        category_facets: CategoryFacetProvider,
        settings: CatalogSearchSettings,
        hooks: Hooks | None = None,
    ) -> None:
        self._client = client
        self._settings = settings
        self._filters = FilterTranslator(fields, settings, hooks)
        self._sort = SortTranslator(fields, hooks)
        self._facets = FacetPlanner(fields, category_facets, settings)
        self._selection = FieldSelectionPlanner(fields, settings)

    @property
    def selection(self) -> FieldSelectionPlanner:
        return self._selection

    async def prepare_query(
        self,
        args: Mapping[str, Any],
        plan: FieldPlan,
        executor: QueryExecutor,
        *,
        store_id: Any = None,
        skip_sort: bool = False,
        skip_facets: bool = False,
    ) -> PreparedQuery:
        query = self._client.new_query()
        self._filters.apply(query, args, self._settings.store_id if store_id is None else store_id)
        if not skip_sort:
            self._sort.apply(query, args)
        if not skip_facets:
            await self._facets.apply(query)
        self._selection.apply(query, plan, args.get("pageSize"))

        search = args.get("search") or ""
        if search:
            query.query_text = parse_search_text(search)
            query.query_prepend = self._settings.search_query_boost + query.query_prepend

        descriptor = query.freeze()
        _log.debug(
            "catalog_search.query.built",
            query_text=descriptor.query_text,
            filters=len(descriptor.filters),
            facets=len(descriptor.facets),
            page_size=descriptor.page_size,
        )
        return PreparedQuery(descriptor, executor)


__all__ = ["IDENTIFIERS_ONLY", "QueryBuilder"]
