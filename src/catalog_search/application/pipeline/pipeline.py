"""Application pipeline – Pipeline."""
from __future__ import annotations

import functools
from typing import Any, Iterable

from catalog_search.application.pipeline.middleware import Handler, Middleware


class Pipeline:
    """Ordered middleware chain; the first middleware added is the outermost."""

    def __init__(self, middlewares: Iterable[Middleware] = ()) -> None:
        self._middlewares: list[Middleware] = list(middlewares)

    def add(self, middleware: Middleware) -> "Pipeline":
        self._middlewares.append(middleware)
        return self

    async def execute(self, request: Any, handler: Handler) -> Any:
        middlewares = tuple(self._middlewares)

        async def call(index: int, req: Any) -> Any:
            if index == len(middlewares):
                return await handler(req)
            return await middlewares[index](req, functools.partial(call, index + 1))

        return await call(0, request)


__all__ = ["Pipeline"]
