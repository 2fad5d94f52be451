"""Application pipeline – Middleware contract."""
from __future__ import annotations

import abc
from typing import Any, Awaitable, Callable

#: Innermost callable of the chain, e.g. ``ProductsResolver._handle``.
Handler = Callable[[Any], Awaitable[Any]]
#: The remainder of the chain as seen by one middleware.
Next = Handler


class Middleware(abc.ABC):
    """Wraps a resolve call.

    Implementations receive the request (a ``ResolveRequest`` for the
    products resolver) and must either await ``next_(request)`` and return
    its result, or return their own result without calling it.
    """

    @abc.abstractmethod
    async def __call__(self, request: Any, next_: Next) -> Any: ...


__all__ = ["Handler", "Middleware", "Next"]
