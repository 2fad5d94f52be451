"""Unit tests for sort translation, facet planning and field selection."""

from __future__ import annotations

import asyncio

import pytest

from catalog_search.application.search import (
    EngineQuery,
    FieldRef,
    FilterClause,
    HookPoint,
    Hooks,
    SortDirection,
    SortFieldError,
)
from catalog_search.application.search.facets import FacetPlanner
from catalog_search.application.search.selection import FieldPlan, FieldSelectionPlanner
from catalog_search.application.search.sort import SortTranslator
from catalog_search.config.settings import CatalogSearchSettings
from catalog_search.testing.fakes import DictFieldResolver, InMemoryCategoryFacetProvider

FIELDS = DictFieldResolver({"name": "name", "price": "price_f", "color": "color_facet", "brand": "brand_facet"})


# ---------------------------------------------------------------------------
# SortTranslator
# ---------------------------------------------------------------------------


class TestSortTranslator:
    def test_explicit_sort(self) -> None:
        query = EngineQuery()
        SortTranslator(FIELDS).apply(query, {"sort": {"sort_by": "price", "sort_order": "DESC"}})
        (sort,) = query.sorts
        assert sort.field.name == "price_f"
        assert sort.direction is SortDirection.DESC

    def test_invalid_direction_defaults_to_ascending(self) -> None:
        query = EngineQuery()
        SortTranslator(FIELDS).apply(query, {"sort": {"sort_by": "name", "sort_order": "sideways"}})
        assert query.sorts[0].direction is SortDirection.ASC

    def test_search_without_sort_uses_relevance(self) -> None:
        query = EngineQuery()
        SortTranslator(FIELDS).apply(query, {"search": "red"})
        (sort,) = query.sorts
        assert sort.field.name == "score"
        assert sort.direction is SortDirection.DESC

    def test_listing_without_sort_has_no_sort(self) -> None:
        query = EngineQuery()
        SortTranslator(FIELDS).apply(query, {"filter": {"category_id": "12"}})
        assert query.sorts == []

    def test_unknown_sort_field_raises(self) -> None:
        with pytest.raises(SortFieldError) as exc_info:
            SortTranslator(FIELDS).apply(EngineQuery(), {"sort": {"sort_by": "nonexistent"}})
        assert exc_info.value.attribute_code == "nonexistent"

    def test_sort_before_hook_can_change_direction(self) -> None:
        hooks = Hooks().register(
            HookPoint.SORT_BEFORE, lambda pending: pending.update(direction=SortDirection.ASC)
        )
        query = EngineQuery()
        SortTranslator(FIELDS, hooks).apply(query, {"search": "red"})
        assert query.sorts[0].direction is SortDirection.ASC

    def test_sort_before_hook_can_drop_sort(self) -> None:
        hooks = Hooks().register(HookPoint.SORT_BEFORE, lambda pending: pending.update(field=None))
        query = EngineQuery()
        SortTranslator(FIELDS, hooks).apply(query, {"search": "red"})
        assert query.sorts == []


# ---------------------------------------------------------------------------
# FacetPlanner
# ---------------------------------------------------------------------------


def _planner(**settings: object) -> tuple[FacetPlanner, InMemoryCategoryFacetProvider]:
    provider = InMemoryCategoryFacetProvider(FIELDS, facets={12: ["brand"]}, stats={12: ["price"]})
    return FacetPlanner(FIELDS, provider, CatalogSearchSettings(**settings)), provider


class TestFacetPlanner:
    def test_category_id_facet_always_requested(self) -> None:
        planner, provider = _planner()
        query = EngineQuery()
        asyncio.run(planner.apply(query))
        assert [f.name for f in query.facets] == ["category_id"]
        assert query.stats == []
        assert provider.requested == []

    def test_category_filter_adds_category_facets_first(self) -> None:
        planner, provider = _planner(base_facets=("color",), base_stats=("price",))
        query = EngineQuery().add_filter(FilterClause(FieldRef("category_id", "category_id", "12")))
        asyncio.run(planner.apply(query))
        assert [f.name for f in query.facets] == ["brand_facet", "color_facet", "category_id"]
        assert [f.name for f in query.stats] == ["price_f", "price_f"]
        assert provider.requested == ["12"]

    def test_unknown_base_codes_are_skipped(self) -> None:
        planner, _ = _planner(base_facets=("nonexistent", "color"), base_stats=("nonexistent",))
        query = EngineQuery()
        asyncio.run(planner.apply(query))
        assert [f.name for f in query.facets] == ["color_facet", "category_id"]
        assert query.stats == []


# ---------------------------------------------------------------------------
# FieldSelectionPlanner
# ---------------------------------------------------------------------------


def _selection(**settings: object) -> FieldSelectionPlanner:
    return FieldSelectionPlanner(FIELDS, CatalogSearchSettings(**settings))


class TestFieldSelectionPlan:
    @pytest.mark.parametrize(
        "selection",
        [
            {"items": {"sku": True}},
            {"items": {"sku": True, "__typename": True}},
            {"items_ids": True, "total_count": True},
            None,
        ],
    )
    def test_identifiers_only(self, selection: dict | None) -> None:
        assert _selection().plan(selection).identifiers_only is True

    @pytest.mark.parametrize(
        "selection",
        [
            {"items": {"sku": True, "name": True}},
            {"items": {"name": True}},
            # items_ids only selects the identifiers-only plan without an items body
            {"items": {"name": True}, "items_ids": True},
        ],
    )
    def test_full_query(self, selection: dict) -> None:
        plan = _selection().plan(selection)
        assert plan.identifiers_only is False
        assert plan.query_fields == selection["items"]

    def test_custom_identifier_field(self) -> None:
        plan = _selection(identifier_field="entity_id").plan({"items": {"entity_id": True}})
        assert plan.identifiers_only is True


class TestFieldSelectionApply:
    def test_identifiers_only_selects_identifier_with_large_ceiling(self) -> None:
        query = EngineQuery()
        _selection().apply(query, FieldPlan(identifiers_only=True), None)
        assert [f.name for f in query.fields_to_select] == ["sku"]
        assert query.page_size == 50000

    def test_full_query_selects_scalar_fields_only(self) -> None:
        query = EngineQuery()
        plan = FieldPlan(
            identifiers_only=False,
            query_fields={"sku": True, "name": True, "media": {"url": True}, "nonexistent": True},
        )
        _selection().apply(query, plan, None)
        assert [f.name for f in query.fields_to_select] == ["sku", "name"]
        assert query.page_size == 100

    @pytest.mark.parametrize(
        ("requested", "expected"),
        [(20, 20), (60000, 50000), (50000, 50000), (0, 50000), (-5, 50000), ("20", 50000), (True, 50000)],
    )
    def test_effective_page_size(self, requested: object, expected: int) -> None:
        assert FieldSelectionPlanner.effective_page_size(requested, 50000) == expected

    def test_full_query_page_size_capped(self) -> None:
        query = EngineQuery()
        _selection().apply(query, FieldPlan(False, {"name": True}), 200)
        assert query.page_size == 100
