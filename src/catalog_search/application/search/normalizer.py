"""Application search – shaping engine responses into the result envelope."""
from __future__ import annotations

import dataclasses
from typing import Any, Iterable, Mapping

from catalog_search.application.search.hooks import HookPoint, Hooks
from catalog_search.application.search.response import Document, EngineResponse

#: First synthetic position key assigned to returned items.
ITEM_POSITION_START = 300

_FACET_SUFFIXES = ("_facet", "_f")


@dataclasses.dataclass
class ResultEnvelope:
    total_count: int
    items: dict[int, dict[str, Any]]
    items_ids: list[Any]
    page_info: dict[str, int]
    facets: list[dict[str, Any]]
    stats: list[dict[str, Any]]
    debug_info: dict[str, Any]
    corrected_query: str | None = None

    def to_dict(self) -> dict[str, Any]:
        data = dataclasses.asdict(self)
        if self.corrected_query is None:
            data.pop("corrected_query")
        return data


def stat_code(field_name: str) -> str:
    """Strip the engine's facet suffix: ``price_f`` -> ``price``."""
    for suffix in _FACET_SUFFIXES:
        if field_name.endswith(suffix) and len(field_name) > len(suffix):
            return field_name[: -len(suffix)]
    return field_name


def _is_blank_value_id(value_id: Any) -> bool:
    return not value_id or value_id == "0"


class ResultNormalizer:
    def __init__(self, identifier_field: str = "sku", hooks: Hooks | None = None) -> None:
        self._identifier_field = identifier_field
        self._hooks = hooks or Hooks()

    def prepare_result_data(self, response: EngineResponse, debug: bool = False) -> ResultEnvelope:
        items, items_ids = self.prepare_items(response.documents)
        return ResultEnvelope(
            total_count=response.num_found,
            items=items,
            items_ids=items_ids,
            page_info={
                "page_size": len(response.documents),
                "current_page": response.current_page,
                # NOTE: raw found count, not a page count
                "total_pages": response.num_found,
            },
            facets=self.prepare_facets(response.facets),
            stats=self.prepare_stats(response.stats),
            debug_info=self.prepare_debug_info(response.debug_info) if debug else {},
        )

    def prepare_items(self, documents: Iterable[Document]) -> tuple[dict[int, dict[str, Any]], list[Any]]:
        """Key items by position starting at 300 and collect identifiers in the same order."""
        items: dict[int, dict[str, Any]] = {}
        positioned_ids: list[tuple[int, Any]] = []
        for position, document in enumerate(documents, start=ITEM_POSITION_START):
            self._hooks.dispatch(HookPoint.DOCUMENT_BEFORE, document)
            identifier = document.get(self._identifier_field)
            if identifier is not None:
                positioned_ids.append((position, identifier))
            item = dict(document.fields)
            self._hooks.dispatch(HookPoint.DOCUMENT_AFTER, item)
            items[position] = item

        positioned_ids.sort(key=lambda pair: pair[0])
        return dict(sorted(items.items())), [identifier for _, identifier in positioned_ids]

    @staticmethod
    def prepare_facets(facets: Mapping[str, Mapping[Any, int]]) -> list[dict[str, Any]]:
        prepared: list[dict[str, Any]] = []
        for code, buckets in facets.items():
            values = [
                {"value_id": value_id, "count": count}
                for value_id, count in buckets.items()
                if not _is_blank_value_id(value_id)
            ]
            if values:
                prepared.append({"code": code, "values": values})
        return prepared

    @staticmethod
    def prepare_stats(stats: Mapping[str, Any]) -> list[dict[str, Any]]:
        return [{"code": stat_code(field), "values": value} for field, value in stats.items()]

    @staticmethod
    def prepare_debug_info(debug: Mapping[str, Any]) -> dict[str, Any]:
        info = dict(debug.get("params") or {})
        info["code"] = debug.get("code", 0)
        info["message"] = debug.get("message", "")
        info["uri"] = debug.get("uri", "")
        return info


__all__ = ["ITEM_POSITION_START", "ResultEnvelope", "ResultNormalizer", "stat_code"]
