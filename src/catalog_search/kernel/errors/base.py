"""Kernel errors – BaseError, the root of every error raised by the resolver."""

from __future__ import annotations

import json
from typing import Any


class BaseError(Exception):
    """Error carrying a stable machine-readable ``code``.

    The query-serving layer turns :meth:`to_dict` into the ``extensions``
    block of a GraphQL error, so ``detail`` must stay JSON-serialisable.

    Args:
        message: Text shown to the API caller.
        code: Overrides the class-level ``default_code``.
        detail: Extra structured context.
        cause: Underlying exception; also set as ``__cause__``.
    """

    default_code: str = "base_error"

    def __init__(
        self,
        message: str,
        *,
        code: str | None = None,
        detail: dict[str, Any] | None = None,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code if code is not None else self.default_code
        self.detail: dict[str, Any] = dict(detail) if detail else {}
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"code": self.code, "message": self.message, "detail": self.detail}
        if self.cause is not None:
            data["cause"] = repr(self.cause)
        return data

    def __str__(self) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False, default=str)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"


__all__ = ["BaseError"]
