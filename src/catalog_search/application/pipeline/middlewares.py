"""Application pipeline – built-in middleware implementations."""
from __future__ import annotations

import asyncio
import time
from typing import Any

from catalog_search.application.pipeline.middleware import Middleware, Next
from catalog_search.kernel.errors import TimeoutError as AppTimeoutError
from catalog_search.observability.logging import get_logger


class LoggingMiddleware(Middleware):
    """Log resolve completion/failure with timing.

    Requests exposing a ``log_fields()`` method contribute extra structured
    fields (search text, page size, ...) to both events.
    """

    def __init__(self, logger: Any = None) -> None:
        self._log = logger or get_logger(__name__)

    async def __call__(self, request: Any, next_: Next) -> Any:
        name = type(request).__name__
        log_fields = getattr(request, "log_fields", None)
        fields: dict[str, Any] = log_fields() if callable(log_fields) else {}
        start = time.perf_counter()
        try:
            result = await next_(request)
        except Exception as exc:
            duration = (time.perf_counter() - start) * 1000
            self._log.error(
                "catalog_search.resolve.failed",
                request=name,
                duration_ms=round(duration, 2),
                error=type(exc).__name__,
                **fields,
            )
            raise
        duration = (time.perf_counter() - start) * 1000
        self._log.info("catalog_search.resolve.completed", request=name, duration_ms=round(duration, 2), **fields)
        return result


class TimeoutMiddleware(Middleware):
    """Raise ``TimeoutError`` if the wrapped call exceeds *timeout_seconds*."""

    def __init__(self, timeout_seconds: float) -> None:
        self._timeout = timeout_seconds

    async def __call__(self, request: Any, next_: Next) -> Any:
        try:
            return await asyncio.wait_for(next_(request), timeout=self._timeout)
        except asyncio.TimeoutError as exc:
            raise AppTimeoutError(f"Resolve timed out after {self._timeout}s") from exc


__all__ = ["LoggingMiddleware", "TimeoutMiddleware"]
