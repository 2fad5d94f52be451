"""Application – use-case building blocks (framework-agnostic)."""

from catalog_search.application.pipeline import Middleware, Pipeline
from catalog_search.application.search import ProductsResolver, ResolveContext

__all__ = [
    "Middleware",
    "Pipeline",
    "ProductsResolver",
    "ResolveContext",
]
