"""Kernel errors – failures raised around a resolve call."""

from __future__ import annotations

from catalog_search.kernel.errors.base import BaseError


class ApplicationError(BaseError):
    default_code = "application_error"


class TimeoutError(ApplicationError):  # noqa: A001
    """A resolve call exceeded the deadline set by ``TimeoutMiddleware``."""

    default_code = "timeout"


__all__ = ["ApplicationError", "TimeoutError"]
