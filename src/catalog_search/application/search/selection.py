"""Application search – field-selection driven query planning."""
from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from typing import Any

from catalog_search.application.search.errors import FieldNotFoundError
from catalog_search.application.search.ports import FieldResolver
from catalog_search.application.search.query import EngineQuery, FieldRef
from catalog_search.config.settings import CatalogSearchSettings
from catalog_search.observability.logging import get_logger

_log = get_logger(__name__)


@dataclasses.dataclass(frozen=True)
class FieldPlan:
    """Outcome of inspecting the caller's requested output fields.

    ``query_fields`` is empty for identifiers-only requests.
    """

    identifiers_only: bool
    query_fields: Mapping[str, Any] = dataclasses.field(default_factory=dict)


class FieldSelectionPlanner:
    def __init__(self, fields: FieldResolver, settings: CatalogSearchSettings) -> None:
        self._fields = fields
        self._settings = settings

    def plan(self, selection: Mapping[str, Any] | None) -> FieldPlan:
        """Decide between an identifiers-only and a full query.

        ``{"items": {"sku": True}}`` (optionally with ``__typename``) and an
        ``items_ids`` selection without ``items`` are identifiers-only.
        """
        selection = selection or {}
        items = selection.get("items")
        items = items if isinstance(items, Mapping) else None
        id_field = self._settings.identifier_field

        if items is not None:
            limit = 2 if "__typename" in items else 1
            if len(items) <= limit and id_field in items:
                return FieldPlan(identifiers_only=True)
            return FieldPlan(identifiers_only=False, query_fields=items)
        return FieldPlan(identifiers_only=True)

    def apply(self, query: EngineQuery, plan: FieldPlan, requested_page_size: Any) -> None:
        """Add fields-to-select and the effective page size to *query*."""
        if plan.identifiers_only or not plan.query_fields:
            ceiling = self._settings.identifiers_page_size
            query.add_fields_to_select([self._fields.field_for_product_attribute(self._settings.identifier_field)])
        else:
            ceiling = self._settings.full_page_size
            query.add_fields_to_select(
                field
                for code in self.leaf_fields(plan.query_fields)
                if (field := self._resolve(code)) is not None
            )
        query.set_page_size(self.effective_page_size(requested_page_size, ceiling))

    @staticmethod
    def leaf_fields(query_fields: Mapping[str, Any]) -> list[str]:
        """Keep scalar selections only; object-shaped sub-selections are dropped."""
        return [name for name, value in query_fields.items() if not isinstance(value, Mapping)]

    @staticmethod
    def effective_page_size(requested: Any, ceiling: int) -> int:
        if isinstance(requested, int) and not isinstance(requested, bool) and 0 < requested < ceiling:
            return requested
        return ceiling

    def _resolve(self, code: str) -> FieldRef | None:
        try:
            field = self._fields.field_for(code)
        except FieldNotFoundError:
            field = None
        if field is None:
            _log.debug("catalog_search.select.skipped", attribute_code=code)
        return field


__all__ = ["FieldPlan", "FieldSelectionPlanner"]
