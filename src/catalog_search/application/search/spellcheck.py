"""Application search – did-you-mean fallback for zero-result searches.

The engine is asked for spelling suggestions, every candidate phrase is
probed with a count-only query, and the phrase with the most matches wins.
Candidates come from two pools:

* the primary pool – engine collations, then the phrase built from each
  term's most frequent alternative;
* the secondary pool – every combination of alternatives, tried only when
  nothing in the primary pool matched.
"""
from __future__ import annotations

import itertools
from typing import Any, Iterable

from catalog_search.application.search.builder import IDENTIFIERS_ONLY, QueryBuilder
from catalog_search.application.search.execution import QueryExecutor
from catalog_search.application.search.ports import EngineClient
from catalog_search.application.search.response import SpellingSuggestions
from catalog_search.config.settings import CatalogSearchSettings
from catalog_search.observability.logging import get_logger

_log = get_logger(__name__)


def _replace_terms(text: str, replacements: dict[str, str]) -> str:
    return " ".join(replacements.get(token.lower(), token) for token in text.split())


def _unique(candidates: Iterable[str], original: str) -> list[str]:
    seen = {original.strip().lower()}
    out: list[str] = []
    for candidate in candidates:
        candidate = candidate.strip()
        key = candidate.lower()
        if candidate and key not in seen:
            seen.add(key)
            out.append(candidate)
    return out


def alternative_search_texts(
    original: str,
    suggestions: SpellingSuggestions,
    *,
    only_best: bool = True,
    max_variants: int = 10,
) -> list[str]:
    """Return candidate rephrasings of *original*, best guesses first."""
    candidates: list[str] = list(suggestions.collations)
    suggested = [term for term in suggestions.terms if term.alternatives]
    best = {term.term.lower(): term.best for term in suggested if term.best}
    if best:
        candidates.append(_replace_terms(original, best))

    if not only_best and suggested:
        keys = [term.term.lower() for term in suggested]
        choices = [[word for word, _ in term.alternatives] for term in suggested]
        combos = itertools.islice(itertools.product(*choices), max_variants)
        candidates.extend(_replace_terms(original, dict(zip(keys, combo))) for combo in combos)

    return _unique(candidates, original)


class SpellcheckResolver:
    def __init__(
        self,
        client: EngineClient,
        builder: QueryBuilder,
        settings: CatalogSearchSettings,
    ) -> None:
        self._client = client
        self._builder = builder
        self._settings = settings

    async def resolve(self, text: str, executor: QueryExecutor, *, store_id: Any = None) -> str | None:
        """Return the best corrected phrase for *text*, or ``None``."""
        suggestions = await self._client.check_spelling(text)
        primary = alternative_search_texts(
            text, suggestions, max_variants=self._settings.spellcheck_max_variants
        )
        best = await self._best_candidate(primary, executor, store_id)
        if best is None:
            tried = set(primary)
            secondary = [
                candidate
                for candidate in alternative_search_texts(
                    text,
                    suggestions,
                    only_best=False,
                    max_variants=self._settings.spellcheck_max_variants,
                )
                if candidate not in tried
            ]
            best = await self._best_candidate(secondary, executor, store_id)

        _log.debug("catalog_search.spellcheck.resolved", original=text, corrected=best)
        return best

    async def _best_candidate(
        self,
        candidates: Iterable[str],
        executor: QueryExecutor,
        store_id: Any,
    ) -> str | None:
        best_text: str | None = None
        best_count = 0
        for candidate in candidates:
            query = await self._builder.prepare_query(
                {"search": candidate},
                IDENTIFIERS_ONLY,
                executor,
                store_id=store_id,
                skip_sort=True,
                skip_facets=True,
            )
            count = (await query.get_response()).num_found
            _log.debug("catalog_search.spellcheck.candidate", candidate=candidate, num_found=count)
            if (best_text is None and count > 0) or count > best_count:
                best_text = candidate
                best_count = count
        return best_text


__all__ = ["SpellcheckResolver", "alternative_search_texts"]
