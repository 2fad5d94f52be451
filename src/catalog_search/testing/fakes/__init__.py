"""Testing fakes – in-memory doubles for the search ports."""
from catalog_search.testing.fakes.category_facets import InMemoryCategoryFacetProvider
from catalog_search.testing.fakes.engine import InMemoryEngineClient
from catalog_search.testing.fakes.fields import DictFieldResolver
from catalog_search.testing.fakes.recorder import InMemorySearchQueryRecorder

__all__ = [
    "DictFieldResolver",
    "InMemoryCategoryFacetProvider",
    "InMemoryEngineClient",
    "InMemorySearchQueryRecorder",
]
