"""Application search – optional callback injection points.

Callbacks are registered per :class:`HookPoint` and run synchronously in
registration order with the single mutable object for that stage:

=================  ==========================================
Hook point         Payload
=================  ==========================================
ARGS_BEFORE        merged args ``dict`` (mutable)
ARGS_AFTER         validated args ``dict`` (read-only by convention)
FILTERS_BEFORE     :class:`EngineQuery`
FILTERS_AFTER      :class:`EngineQuery`
SORT_BEFORE        ``{"field": FieldRef | None, "direction": SortDirection}``
SORT_AFTER         :class:`EngineQuery`
EXECUTE_BEFORE     :class:`PreparedQuery`
EXECUTE_AFTER      :class:`EngineResponse`
DOCUMENT_BEFORE    :class:`Document`
DOCUMENT_AFTER     item ``dict`` (mutable)
RESULT_BEFORE      :class:`EngineResponse`
RESULT_AFTER       result ``dict`` (mutable)
=================  ==========================================
"""
from __future__ import annotations

from collections import defaultdict
from enum import Enum
from typing import Any, Callable

HookCallback = Callable[[Any], None]


class HookPoint(str, Enum):
    ARGS_BEFORE = "args_before"
    ARGS_AFTER = "args_after"
    FILTERS_BEFORE = "filters_before"
    FILTERS_AFTER = "filters_after"
    SORT_BEFORE = "sort_before"
    SORT_AFTER = "sort_after"
    EXECUTE_BEFORE = "execute_before"
    EXECUTE_AFTER = "execute_after"
    DOCUMENT_BEFORE = "document_before"
    DOCUMENT_AFTER = "document_after"
    RESULT_BEFORE = "result_before"
    RESULT_AFTER = "result_after"


class Hooks:
    """Ordered registry of hook callbacks; empty by default."""

    def __init__(self) -> None:
        self._callbacks: dict[HookPoint, list[HookCallback]] = defaultdict(list)

    def register(self, point: HookPoint, callback: HookCallback) -> "Hooks":
        """Append *callback* to *point* (fluent API)."""
        self._callbacks[point].append(callback)
        return self

    def dispatch(self, point: HookPoint, payload: Any) -> None:
        for callback in self._callbacks.get(point, ()):
            callback(payload)

    def __len__(self) -> int:
        return sum(len(callbacks) for callbacks in self._callbacks.values())


__all__ = ["HookCallback", "HookPoint", "Hooks"]
