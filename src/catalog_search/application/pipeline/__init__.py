"""Application pipeline – resolve middleware chain."""
from catalog_search.application.pipeline.middleware import Handler, Middleware, Next
from catalog_search.application.pipeline.middlewares import LoggingMiddleware, TimeoutMiddleware
from catalog_search.application.pipeline.pipeline import Pipeline

__all__ = [
    "Handler",
    "LoggingMiddleware",
    "Middleware",
    "Next",
    "Pipeline",
    "TimeoutMiddleware",
]
