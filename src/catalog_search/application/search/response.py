"""Application search – engine response value objects."""
from __future__ import annotations

import dataclasses
from typing import Any


@dataclasses.dataclass(frozen=True)
class Document:
    """One matched record as returned by the engine."""

    fields: dict[str, Any]

    def get(self, name: str, default: Any = None) -> Any:
        return self.fields.get(name, default)


@dataclasses.dataclass(frozen=True)
class EngineResponse:
    """Read-only result of executing a :class:`QueryDescriptor`.

    ``facets`` maps engine field → value id → count; ``stats`` maps engine
    field → raw aggregate (min/max/...); ``debug_info`` carries the engine's
    ``params``, ``code``, ``message`` and ``uri`` when available.
    """

    num_found: int
    documents: tuple[Document, ...] = ()
    facets: dict[str, dict[Any, int]] = dataclasses.field(default_factory=dict)
    stats: dict[str, Any] = dataclasses.field(default_factory=dict)
    current_page: int = 1
    debug_info: dict[str, Any] = dataclasses.field(default_factory=dict)


@dataclasses.dataclass(frozen=True)
class TermSuggestion:
    """Spelling alternatives for a single input term.

    ``alternatives`` holds ``(word, frequency)`` pairs in engine order.
    """

    term: str
    alternatives: tuple[tuple[str, int], ...] = ()

    @property
    def best(self) -> str | None:
        if not self.alternatives:
            return None
        return max(self.alternatives, key=lambda alt: alt[1])[0]


@dataclasses.dataclass(frozen=True)
class SpellingSuggestions:
    terms: tuple[TermSuggestion, ...] = ()
    collations: tuple[str, ...] = ()


__all__ = ["Document", "EngineResponse", "SpellingSuggestions", "TermSuggestion"]
