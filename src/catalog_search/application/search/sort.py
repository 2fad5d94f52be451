"""Application search – sort argument translation."""
from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from catalog_search.application.search.errors import FieldNotFoundError, SortFieldError
from catalog_search.application.search.hooks import HookPoint, Hooks
from catalog_search.application.search.ports import FieldResolver
from catalog_search.application.search.query import EngineQuery, FieldRef, SortClause, SortDirection

RELEVANCE_FIELD = "score"


class SortTranslator:
    """Resolves ``sort`` (or relevance for free-text queries) into a sort clause."""

    def __init__(self, fields: FieldResolver, hooks: Hooks | None = None) -> None:
        self._fields = fields
        self._hooks = hooks or Hooks()

    def apply(self, query: EngineQuery, args: Mapping[str, Any]) -> None:
        sort_args = args.get("sort") if isinstance(args.get("sort"), Mapping) else {}
        direction = SortDirection.ASC
        if sort_args.get("sort_order") in (SortDirection.ASC.value, SortDirection.DESC.value):
            direction = SortDirection(sort_args["sort_order"])

        field: FieldRef | None = None
        if sort_args.get("sort_by"):
            field = self._resolve(sort_args["sort_by"], direction)
        elif args.get("search"):
            direction = SortDirection.DESC
            field = self._resolve(RELEVANCE_FIELD, direction)

        pending = {"field": field, "direction": direction}
        self._hooks.dispatch(HookPoint.SORT_BEFORE, pending)
        if pending["field"] is not None:
            query.add_sort(SortClause(pending["field"], SortDirection(pending["direction"])))
        self._hooks.dispatch(HookPoint.SORT_AFTER, query)

    def _resolve(self, attribute_code: str, direction: SortDirection) -> FieldRef:
        try:
            field = self._fields.field_for(attribute_code, direction.value)
        except FieldNotFoundError as exc:
            raise SortFieldError(attribute_code, cause=exc) from exc
        if field is None:
            raise SortFieldError(attribute_code)
        return field


__all__ = ["RELEVANCE_FIELD", "SortTranslator"]
