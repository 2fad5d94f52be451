"""Kernel – framework-agnostic building blocks."""

from catalog_search.kernel.errors import (
    ApplicationError,
    BaseError,
    DomainError,
    ExternalServiceError,
    InfrastructureError,
    NotFoundError,
    TimeoutError,
    ValidationError,
)

__all__ = [
    "ApplicationError",
    "BaseError",
    "DomainError",
    "ExternalServiceError",
    "InfrastructureError",
    "NotFoundError",
    "TimeoutError",
    "ValidationError",
]
