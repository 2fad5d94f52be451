"""Observability – get_logger helper."""
from __future__ import annotations

from typing import Any

import structlog


def get_logger(name: str | None = None, **initial_values: Any) -> Any:
    """Return a structlog logger named *name* with *initial_values* bound.

    Modules create one at import time (``_log = get_logger(__name__)``);
    structlog resolves the configuration lazily on first use.
    """
    logger = structlog.get_logger(name)
    return logger.bind(**initial_values) if initial_values else logger


__all__ = ["get_logger"]
