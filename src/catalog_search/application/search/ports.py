"""Application search – collaborator ports."""
from __future__ import annotations

from typing import Any, Protocol, Sequence, runtime_checkable

from catalog_search.application.search.query import EngineQuery, FieldRef, QueryDescriptor
from catalog_search.application.search.response import EngineResponse, SpellingSuggestions


@runtime_checkable
class FieldResolver(Protocol):
    """Maps catalog attribute codes to engine-native fields.

    ``field_for`` returns ``None`` (or raises :class:`FieldNotFoundError`)
    for unknown codes; ``field_for_product_attribute`` always raises.
    """

    def field_for(self, attribute_code: str, value: Any = None) -> FieldRef | None: ...
    def field_for_product_attribute(self, attribute_code: str, value: Any = None) -> FieldRef: ...


@runtime_checkable
class EngineClient(Protocol):
    def new_query(self) -> EngineQuery: ...
    async def execute(self, query: QueryDescriptor) -> EngineResponse: ...
    async def check_spelling(self, text: str) -> SpellingSuggestions: ...


@runtime_checkable
class CategoryFacetProvider(Protocol):
    async def facet_fields_for(self, category_id: Any) -> Sequence[FieldRef]: ...
    async def stat_fields_for(self, category_id: Any) -> Sequence[FieldRef]: ...


@runtime_checkable
class SearchQueryRecorder(Protocol):
    """Persists how many results a free-text query produced."""

    async def record(self, query_text: str, num_results: int) -> None: ...


__all__ = ["CategoryFacetProvider", "EngineClient", "FieldResolver", "SearchQueryRecorder"]
