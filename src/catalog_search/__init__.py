"""
catalog_search – Product search/listing resolver over a document search engine.

Import path convention::

    from catalog_search.application.search import ProductsResolver, ResolveContext
    from catalog_search.config.settings import CatalogSearchSettings
    from catalog_search.kernel.errors import ValidationError
    from catalog_search.testing.fakes import InMemoryEngineClient
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
