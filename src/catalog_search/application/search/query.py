"""Application search – engine query model.

:class:`EngineQuery` is the mutable builder filled in by the translators;
:meth:`EngineQuery.freeze` turns it into an immutable :class:`QueryDescriptor`
that the engine client executes.
"""
from __future__ import annotations

import dataclasses
from enum import Enum
from typing import Any, Iterable

#: Sentinel used on the unbounded side of a :class:`RangeValue`.
INFINITY = "*"


class FilterOperator(str, Enum):
    EQ = "eq"
    IN = "in"
    GT = "gt"
    LT = "lt"
    GTEQ = "gteq"
    LTEQ = "lteq"


class SortDirection(str, Enum):
    ASC = "ASC"
    DESC = "DESC"


@dataclasses.dataclass(frozen=True)
class RangeValue:
    """Inclusive interval; either bound may be :data:`INFINITY`."""

    lower: Any
    upper: Any

    def __str__(self) -> str:
        return f"[{self.lower} TO {self.upper}]"


@dataclasses.dataclass(frozen=True)
class FieldRef:
    """Engine-native field handle produced by a field resolver.

    ``name`` is the engine field (``price_f``, ``color_facet``, ...) and
    ``attribute_code`` the catalog attribute it was resolved from.
    """

    name: str
    attribute_code: str
    value: Any = None


@dataclasses.dataclass(frozen=True)
class FilterClause:
    field: FieldRef
    operator: FilterOperator = FilterOperator.EQ
    excluded: bool = False

    @property
    def attribute_code(self) -> str:
        return self.field.attribute_code

    @property
    def value(self) -> Any:
        return self.field.value


@dataclasses.dataclass(frozen=True)
class SortClause:
    field: FieldRef
    direction: SortDirection = SortDirection.ASC


@dataclasses.dataclass(frozen=True)
class QueryDescriptor:
    """Immutable, executable snapshot of an :class:`EngineQuery`."""

    filters: tuple[FilterClause, ...] = ()
    sorts: tuple[SortClause, ...] = ()
    facets: tuple[FieldRef, ...] = ()
    stats: tuple[FieldRef, ...] = ()
    fields_to_select: tuple[FieldRef, ...] = ()
    page_size: int | None = None
    query_text: str = ""
    query_prepend: str = ""


class EngineQuery:
    """Mutable query builder owned by one resolve call."""

    def __init__(self, query_prepend: str = "") -> None:
        self.filters: list[FilterClause] = []
        self.sorts: list[SortClause] = []
        self.facets: list[FieldRef] = []
        self.stats: list[FieldRef] = []
        self.fields_to_select: list[FieldRef] = []
        self.page_size: int | None = None
        self.query_text: str = ""
        self.query_prepend: str = query_prepend

    def add_filter(self, clause: FilterClause) -> "EngineQuery":
        self.filters.append(clause)
        return self

    def add_filters(self, clauses: Iterable[FilterClause]) -> "EngineQuery":
        self.filters.extend(clauses)
        return self

    def get_filter(self, attribute_code: str) -> FilterClause | None:
        """Return the first filter on *attribute_code* (or its engine field name)."""
        for clause in self.filters:
            if attribute_code in (clause.attribute_code, clause.field.name):
                return clause
        return None

    def add_sort(self, clause: SortClause) -> "EngineQuery":
        self.sorts.append(clause)
        return self

    def add_facet(self, field: FieldRef) -> "EngineQuery":
        self.facets.append(field)
        return self

    def add_facets(self, fields: Iterable[FieldRef]) -> "EngineQuery":
        self.facets.extend(fields)
        return self

    def add_stat(self, field: FieldRef) -> "EngineQuery":
        self.stats.append(field)
        return self

    def add_stats(self, fields: Iterable[FieldRef]) -> "EngineQuery":
        self.stats.extend(fields)
        return self

    def add_fields_to_select(self, fields: Iterable[FieldRef]) -> "EngineQuery":
        self.fields_to_select.extend(fields)
        return self

    def set_page_size(self, page_size: int) -> "EngineQuery":
        self.page_size = page_size
        return self

    def freeze(self) -> QueryDescriptor:
        return QueryDescriptor(
            filters=tuple(self.filters),
            sorts=tuple(self.sorts),
            facets=tuple(self.facets),
            stats=tuple(self.stats),
            fields_to_select=tuple(self.fields_to_select),
            page_size=self.page_size,
            query_text=self.query_text,
            query_prepend=self.query_prepend,
        )


__all__ = [
    "INFINITY",
    "EngineQuery",
    "FieldRef",
    "FilterClause",
    "FilterOperator",
    "QueryDescriptor",
    "RangeValue",
    "SortClause",
    "SortDirection",
]
