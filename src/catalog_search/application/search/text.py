"""Application search – free-text normalisation."""
from __future__ import annotations

import re

_WHITESPACE = re.compile(r"\s+")
_RESERVED = re.compile(r'([+\-!(){}\[\]^"~*?:\\/]|&&|\|\|)')


def parse_search_text(text: str) -> str:
    """Collapse whitespace and escape the engine's reserved query characters."""
    collapsed = _WHITESPACE.sub(" ", text).strip()
    return _RESERVED.sub(lambda m: "".join("\\" + ch for ch in m.group(0)), collapsed)


__all__ = ["parse_search_text"]
