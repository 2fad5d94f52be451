"""Application search – merging context arguments into call arguments."""
from __future__ import annotations

from collections.abc import Mapping, Sequence
from enum import Enum
from typing import Any


class ArgsMergePolicy(str, Enum):
    """How request-scoped context args combine with explicit call args.

    * ``OVERWRITE`` – context args win on every key.
    * ``MERGE`` – context args win, but ``filter.attributes`` from both sides
      are kept.
    * ``DEFAULT`` – explicit call args win on every key.
    """

    OVERWRITE = "overwrite"
    MERGE = "merge"
    DEFAULT = "default"


def merge_args(
    args: Mapping[str, Any] | None,
    context_args: Mapping[str, Any] | None,
    policy: ArgsMergePolicy = ArgsMergePolicy.DEFAULT,
) -> dict[str, Any]:
    """Return a new argument dict; neither input is mutated."""
    explicit = dict(args or {})
    if context_args is None:
        return explicit
    context = dict(context_args)

    if policy is ArgsMergePolicy.OVERWRITE:
        return {**explicit, **context}
    if policy is ArgsMergePolicy.DEFAULT:
        return {**context, **explicit}

    merged = {**explicit, **context}
    context_filter = context.get("filter")
    explicit_filter = explicit.get("filter")
    if (
        isinstance(context_filter, Mapping)
        and context_filter.get("attributes") is not None
        and isinstance(explicit_filter, Mapping)
        and explicit_filter.get("attributes")
    ):
        merged["filter"] = {
            **context_filter,
            "attributes": _union_attributes(context_filter["attributes"], explicit_filter["attributes"]),
        }
    return merged


def _union_attributes(context_attributes: Any, explicit_attributes: Any) -> Any:
    if isinstance(context_attributes, Mapping) and isinstance(explicit_attributes, Mapping):
        return {**context_attributes, **explicit_attributes}
    return [*_attribute_values(context_attributes), *_attribute_values(explicit_attributes)]


def _attribute_values(attributes: Any) -> list[Any]:
    if isinstance(attributes, Mapping):
        return list(attributes.values())
    if _is_list_like(attributes):
        return list(attributes)
    return [attributes]


def _is_list_like(value: Any) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes))


__all__ = ["ArgsMergePolicy", "merge_args"]
