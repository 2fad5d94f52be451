"""Kernel errors – request and lookup failures."""

from __future__ import annotations

from typing import Any

from catalog_search.kernel.errors.base import BaseError


class DomainError(BaseError):
    default_code = "domain_error"


class ValidationError(DomainError):
    """The caller's input is unusable.

    ``errors`` lists the offending inputs, one ``{"field": name, ...}``
    entry per argument, and is included in :meth:`to_dict`.
    """

    default_code = "validation_error"

    def __init__(self, message: str, *, errors: list[dict[str, Any]] | None = None, **kwargs: Any) -> None:
        super().__init__(message, **kwargs)
        self.errors: list[dict[str, Any]] = list(errors or [])

    def to_dict(self) -> dict[str, Any]:
        return {**super().to_dict(), "errors": self.errors}


class NotFoundError(DomainError):
    """A lookup (attribute, field, category, ...) found nothing."""

    default_code = "not_found"

    def __init__(self, resource: str, identifier: Any = None, **kwargs: Any) -> None:
        if identifier is None:
            message = f"{resource} not found"
        else:
            message = f"{resource} '{identifier}' not found"
        super().__init__(message, **kwargs)
        self.resource = resource
        self.identifier = identifier


__all__ = ["DomainError", "NotFoundError", "ValidationError"]
