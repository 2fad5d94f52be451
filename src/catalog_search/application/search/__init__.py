"""Application search – product search/listing resolver over a search engine."""
from catalog_search.application.search.args import ArgsMergePolicy, merge_args
from catalog_search.application.search.builder import QueryBuilder
from catalog_search.application.search.errors import (
    FieldNotFoundError,
    InvalidSearchRequestError,
    SearchEngineError,
    SortFieldError,
)
from catalog_search.application.search.execution import PreparedQuery, QueryExecutor
from catalog_search.application.search.hooks import HookPoint, Hooks
from catalog_search.application.search.normalizer import ResultEnvelope, ResultNormalizer
from catalog_search.application.search.ports import (
    CategoryFacetProvider,
    EngineClient,
    FieldResolver,
    SearchQueryRecorder,
)
from catalog_search.application.search.query import (
    INFINITY,
    EngineQuery,
    FieldRef,
    FilterClause,
    FilterOperator,
    QueryDescriptor,
    RangeValue,
    SortClause,
    SortDirection,
)
from catalog_search.application.search.resolver import ProductsResolver, ResolveContext
from catalog_search.application.search.response import (
    Document,
    EngineResponse,
    SpellingSuggestions,
    TermSuggestion,
)
from catalog_search.application.search.spellcheck import SpellcheckResolver

__all__ = [
    "INFINITY",
    "ArgsMergePolicy",
    "CategoryFacetProvider",
    "Document",
    "EngineClient",
    "EngineQuery",
    "EngineResponse",
    "FieldNotFoundError",
    "FieldRef",
    "FieldResolver",
    "FilterClause",
    "FilterOperator",
    "HookPoint",
    "Hooks",
    "InvalidSearchRequestError",
    "PreparedQuery",
    "ProductsResolver",
    "QueryBuilder",
    "QueryDescriptor",
    "QueryExecutor",
    "RangeValue",
    "ResolveContext",
    "ResultEnvelope",
    "ResultNormalizer",
    "SearchEngineError",
    "SearchQueryRecorder",
    "SortClause",
    "SortDirection",
    "SortFieldError",
    "SpellcheckResolver",
    "SpellingSuggestions",
    "TermSuggestion",
    "merge_args",
]
