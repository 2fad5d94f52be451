"""Kernel errors – failures of the search engine and other backends."""

from __future__ import annotations

from typing import Any

from catalog_search.kernel.errors.base import BaseError


class InfrastructureError(BaseError):
    default_code = "infrastructure_error"


class ExternalServiceError(InfrastructureError):
    """A backend call failed.

    ``service`` names the backend (``"search_engine"``, ...) and
    ``status_code`` carries the transport status when one is known.
    """

    default_code = "external_service_error"

    def __init__(
        self,
        service: str,
        message: str | None = None,
        *,
        status_code: int | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message or f"External service '{service}' error", **kwargs)
        self.service = service
        self.status_code = status_code


__all__ = ["ExternalServiceError", "InfrastructureError"]
