"""Kernel error hierarchy – public re-export surface.

Hierarchy::

    BaseError
    ├── DomainError          (domain.py)
    │   ├── ValidationError
    │   └── NotFoundError
    ├── ApplicationError     (application.py)
    │   └── TimeoutError
    └── InfrastructureError  (infrastructure.py)
        └── ExternalServiceError
"""

from catalog_search.kernel.errors.application import ApplicationError, TimeoutError
from catalog_search.kernel.errors.base import BaseError
from catalog_search.kernel.errors.domain import DomainError, NotFoundError, ValidationError
from catalog_search.kernel.errors.infrastructure import ExternalServiceError, InfrastructureError

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
