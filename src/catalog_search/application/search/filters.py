"""Application search – filter argument translation.

Caller filters arrive as ``{code: scalar | [values] | {operator: value}}``
plus an optional ``attributes`` sub-map of ``"code=value1,value2"`` strings.
Every filter becomes one :class:`FilterClause`; scope filters (store,
object type, visibility, stock status) are always added first.
"""
from __future__ import annotations

import math
import re
from collections.abc import Mapping
from typing import Any, Iterable

from catalog_search.application.search.errors import FieldNotFoundError
from catalog_search.application.search.hooks import HookPoint, Hooks
from catalog_search.application.search.ports import FieldResolver
from catalog_search.application.search.query import (
    INFINITY,
    EngineQuery,
    FieldRef,
    FilterClause,
    FilterOperator,
    RangeValue,
)
from catalog_search.config.settings import CatalogSearchSettings
from catalog_search.observability.logging import get_logger

PRODUCT_OBJECT_TYPE = "product"
STATUS_ENABLED = 1
VISIBILITY_THRESHOLD = 1

_log = get_logger(__name__)

_NUMERIC = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


def _to_number(value: Any) -> int | float:
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return value
    text = str(value).strip()
    try:
        return int(text)
    except ValueError:
        return float(text)


def _is_numeric(value: Any) -> bool:
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    if isinstance(value, float):
        return math.isfinite(value)
    return _NUMERIC.fullmatch(str(value).strip()) is not None


def prepare_filter_value(value: Mapping[str, Any]) -> tuple[FilterOperator, Any]:
    """Translate an ``{operator: value}`` mapping into an operator and engine value.

    A mapping with more than one key is joined into a single comma-separated
    literal and matched as ``eq``; range operators are not applied to it.
    """
    if len(value) > 1:
        return FilterOperator.EQ, ",".join(str(v) for v in value.values())
    if not value:
        return FilterOperator.EQ, ""

    key, raw = next(iter(value.items()))
    if not key:
        return FilterOperator.EQ, ""
    try:
        operator = FilterOperator(key)
    except ValueError:
        operator = FilterOperator.EQ

    if operator is FilterOperator.IN:
        return operator, list(raw) if isinstance(raw, (list, tuple, set)) else raw
    if isinstance(raw, (list, tuple, set)) or not _is_numeric(raw):
        return FilterOperator.EQ, raw

    if operator is FilterOperator.GT:
        return operator, RangeValue(_to_number(raw) + 1, INFINITY)
    if operator is FilterOperator.LT:
        return operator, RangeValue(INFINITY, _to_number(raw) - 1)
    if operator is FilterOperator.GTEQ:
        return operator, RangeValue(_to_number(raw), INFINITY)
    if operator is FilterOperator.LTEQ:
        return operator, RangeValue(INFINITY, _to_number(raw))
    return FilterOperator.EQ, str(raw)


def _prepare_plain_value(value: Any) -> tuple[FilterOperator, Any]:
    if isinstance(value, Mapping):
        return prepare_filter_value(value)
    if isinstance(value, (list, tuple, set)):
        return FilterOperator.EQ, ",".join(str(v) for v in value)
    return FilterOperator.EQ, value


class FilterTranslator:
    """Adds scope filters and caller filters to an :class:`EngineQuery`."""

    def __init__(
        self,
        fields: FieldResolver,
        settings: CatalogSearchSettings,
        hooks: Hooks | None = None,
    ) -> None:
        self._fields = fields
        self._settings = settings
        self._hooks = hooks or Hooks()

    def apply(self, query: EngineQuery, args: Mapping[str, Any], store_id: Any) -> None:
        self._hooks.dispatch(HookPoint.FILTERS_BEFORE, query)
        query.add_filters(self.scope_filters(args, store_id))

        caller_filter = args.get("filter")
        if isinstance(caller_filter, Mapping) and caller_filter:
            query.add_filters(
                self.translate(caller_filter, args.get("remove_tag_excluded") or ())
            )
        self._hooks.dispatch(HookPoint.FILTERS_AFTER, query)

    def scope_filters(self, args: Mapping[str, Any], store_id: Any) -> list[FilterClause]:
        resolve = self._fields.field_for_product_attribute
        clauses = [
            FilterClause(resolve("store_id", store_id)),
            FilterClause(resolve("object_type", PRODUCT_OBJECT_TYPE)),
        ]
        caller_filter = args.get("filter")
        if not (isinstance(caller_filter, Mapping) and "skus" in caller_filter):
            operator, value = prepare_filter_value({"gt": VISIBILITY_THRESHOLD})
            clauses.append(FilterClause(resolve("visibility", value), operator))
        if not self._settings.show_out_of_stock:
            clauses.append(FilterClause(resolve("status", STATUS_ENABLED)))
        return clauses

    def translate(
        self,
        filters: Mapping[str, Any],
        remove_tag_excluded: Iterable[str] = (),
    ) -> list[FilterClause]:
        """Flatten the caller ``filter`` argument into clauses, in key order."""
        clauses: list[FilterClause] = []
        for code, value in filters.items():
            if code == "attributes":
                clauses.extend(self.translate_attributes(value or {}, remove_tag_excluded))
                continue
            operator, prepared = _prepare_plain_value(value)
            try:
                field = self._fields.field_for_product_attribute(code, prepared)
            except FieldNotFoundError:
                _log.debug("catalog_search.filter.skipped", attribute_code=code)
                continue
            clauses.append(FilterClause(field, operator))
        return clauses

    def translate_attributes(
        self,
        attributes: Mapping[str, str] | Iterable[str],
        remove_tag_excluded: Iterable[str] = (),
    ) -> list[FilterClause]:
        """Expand ``"code=value1,value2"`` entries into ``in``/``eq`` clauses.

        Each clause is excluded from facet computation unless its code is
        listed in *remove_tag_excluded*.
        """
        keep_in_facets = set(remove_tag_excluded)
        entries = attributes.values() if isinstance(attributes, Mapping) else attributes
        clauses: list[FilterClause] = []
        for entry in entries:
            parts = str(entry).split("=")
            if len(parts) < 2:
                continue
            code, raw_value = parts[0], parts[1]
            values = raw_value.split(",")
            if len(values) > 1:
                operator, prepared = prepare_filter_value({"in": values})
            else:
                operator, prepared = prepare_filter_value({"eq": raw_value})
            field = self._resolve_optional(code, prepared)
            if field is None:
                continue
            clauses.append(FilterClause(field, operator, excluded=code not in keep_in_facets))
        return clauses

    def _resolve_optional(self, code: str, value: Any) -> FieldRef | None:
        try:
            field = self._fields.field_for(code, value)
        except FieldNotFoundError:
            field = None
        if field is None:
            _log.debug("catalog_search.filter.skipped", attribute_code=code)
        return field


__all__ = [
    "PRODUCT_OBJECT_TYPE",
    "STATUS_ENABLED",
    "FilterTranslator",
    "prepare_filter_value",
]
