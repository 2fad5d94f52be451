"""Shared fixtures for the products resolver tests."""

from __future__ import annotations

from typing import Any, Callable

import pytest

from catalog_search.application.search import Hooks, ProductsResolver
from catalog_search.config.settings import CatalogSearchSettings
from catalog_search.testing.fakes import (
    DictFieldResolver,
    InMemoryCategoryFacetProvider,
    InMemoryEngineClient,
    InMemorySearchQueryRecorder,
)

FIELD_MAP = {
    "name": "name",
    "price": "price_f",
    "color": "color_facet",
    "brand": "brand_facet",
    "skus": "sku",
}


def product(sku: str, **fields: Any) -> dict[str, Any]:
    doc: dict[str, Any] = {
        "sku": sku,
        "store_id": "1",
        "object_type": "product",
        "visibility": 4,
        "status": 1,
    }
    doc.update(fields)
    return doc


CATALOG = [
    product("A1", name="Red Shoes", price_f=50, color_facet="red", brand_facet="nike", category_id="12"),
    product("A2", name="Blue Bag", price_f=120, color_facet="blue", brand_facet="puma", category_id="12"),
    product("A3", name="Red Hat", price_f=30, color_facet="red", brand_facet="nike", category_id="13"),
    product("A4", name="Green Jacket", price_f=200, color_facet="green", category_id="13", status=2),
    product("A5", name="Red Scarf", price_f=20, color_facet="red", category_id="12", visibility=1),
    product("B1", name="Red Shoes", price_f=50, color_facet="red", category_id="12", store_id="2"),
]


@pytest.fixture
def fields() -> DictFieldResolver:
    return DictFieldResolver(FIELD_MAP)


@pytest.fixture
def category_facets(fields: DictFieldResolver) -> InMemoryCategoryFacetProvider:
    return InMemoryCategoryFacetProvider(fields, facets={"12": ["brand"]}, stats={"12": ["price"]})


@pytest.fixture
def make_resolver(
    fields: DictFieldResolver,
    category_facets: InMemoryCategoryFacetProvider,
) -> Callable[..., tuple[ProductsResolver, InMemoryEngineClient]]:
    """Build a resolver over :data:`CATALOG` (or *documents*) with an in-memory engine."""

    def _make(
        documents: list[dict[str, Any]] | None = None,
        *,
        hooks: Hooks | None = None,
        recorder: InMemorySearchQueryRecorder | None = None,
        middlewares: tuple = (),
        **settings: Any,
    ) -> tuple[ProductsResolver, InMemoryEngineClient]:
        client_kwargs = {k: settings.pop(k) for k in ("spelling", "fail_with") if k in settings}
        client = InMemoryEngineClient(CATALOG if documents is None else documents, **client_kwargs)
        resolver = ProductsResolver(
            client,
            fields,
            category_facets,
            CatalogSearchSettings(**settings),
            hooks=hooks,
            middlewares=middlewares,
            search_query_recorder=recorder,
        )
        return resolver, client

    return _make
