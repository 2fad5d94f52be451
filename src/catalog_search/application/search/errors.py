"""Application search – error types raised by the products resolver."""
from __future__ import annotations

from typing import Any

from catalog_search.config.validation import ConfigError
from catalog_search.kernel.errors import ExternalServiceError, NotFoundError, ValidationError


class InvalidSearchRequestError(ValidationError):
    """Neither ``search`` nor ``filter`` was supplied."""

    default_code = "invalid_search_request"

    def __init__(self, message: str = "'search' or 'filter' input argument is required.", **kwargs: Any) -> None:
        super().__init__(
            message,
            errors=[{"field": "search"}, {"field": "filter"}],
            **kwargs,
        )


class FieldNotFoundError(NotFoundError):
    """An attribute code has no engine field mapping."""

    default_code = "field_not_found"

    def __init__(self, attribute_code: str, **kwargs: Any) -> None:
        super().__init__("Field", attribute_code, **kwargs)
        self.attribute_code = attribute_code


class SortFieldError(ConfigError):
    """The requested sort attribute cannot be mapped to an engine field."""

    default_code = "sort_field_error"

    def __init__(self, attribute_code: str, **kwargs: Any) -> None:
        super().__init__(f"Cannot sort by '{attribute_code}': no engine field is configured", **kwargs)
        self.attribute_code = attribute_code


class SearchEngineError(ExternalServiceError):
    """The search engine failed to execute a query."""

    default_code = "search_engine_error"

    def __init__(self, message: str | None = None, **kwargs: Any) -> None:
        super().__init__("search_engine", message, **kwargs)


__all__ = [
    "FieldNotFoundError",
    "InvalidSearchRequestError",
    "SearchEngineError",
    "SortFieldError",
]
