"""Application search – ProductsResolver, the single resolve entry point."""
from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from typing import Any, Iterable

from catalog_search.application.pipeline import Middleware, Pipeline
from catalog_search.application.search.args import ArgsMergePolicy, merge_args
from catalog_search.application.search.builder import QueryBuilder
from catalog_search.application.search.errors import InvalidSearchRequestError
from catalog_search.application.search.execution import QueryExecutor
from catalog_search.application.search.hooks import HookPoint, Hooks
from catalog_search.application.search.normalizer import ResultNormalizer
from catalog_search.application.search.ports import (
    CategoryFacetProvider,
    EngineClient,
    FieldResolver,
    SearchQueryRecorder,
)
from catalog_search.application.search.spellcheck import SpellcheckResolver
from catalog_search.config.settings import CatalogSearchSettings
from catalog_search.observability.logging import get_logger

_log = get_logger(__name__)


@dataclasses.dataclass
class ResolveContext:
    """Request-scoped context shared with the surrounding query layer.

    The caller fills the inputs; ``resolve`` writes ``corrected_query``,
    ``resolved_args`` and ``result`` so sibling resolvers can reuse them.
    """

    args: Mapping[str, Any] | None = None
    merge_policy: ArgsMergePolicy = ArgsMergePolicy.DEFAULT
    store_id: Any = None

    corrected_query: str | None = None
    resolved_args: dict[str, Any] | None = None
    result: dict[str, Any] | None = None


@dataclasses.dataclass
class ResolveRequest:
    args: Mapping[str, Any] | None
    context: ResolveContext
    field_selection: Mapping[str, Any] | None

    def log_fields(self) -> dict[str, Any]:
        args = self.args or {}
        return {"search": args.get("search"), "page_size": args.get("pageSize")}


class ProductsResolver:
    """Resolves a product listing/search request into a result envelope.

    Usage::

        resolver = ProductsResolver(client, fields, category_facets, settings)
        result = await resolver.resolve(
            {"search": "red shoes", "pageSize": 20},
            ResolveContext(store_id=1),
            {"items": {"sku": True, "name": True}, "total_count": True},
        )
    """

    def __init__(
        self,
        client: EngineClient,
        fields: FieldResolver,
        category_facets: CategoryFacetProvider,
        settings: CatalogSearchSettings | None = None,
        *,
        hooks: Hooks | None = None,
        middlewares: Iterable[Middleware] = (),
        search_query_recorder: SearchQueryRecorder | None = None,
    ) -> None:
        self._client = client
        self._settings = settings or CatalogSearchSettings()
        self._hooks = hooks or Hooks()
        self._middlewares = tuple(middlewares)
        self._recorder = search_query_recorder
        self._builder = QueryBuilder(client, fields, category_facets, self._settings, self._hooks)
        self._spellcheck = SpellcheckResolver(client, self._builder, self._settings)
        self._normalizer = ResultNormalizer(self._settings.identifier_field, self._hooks)

    async def resolve(
        self,
        args: Mapping[str, Any] | None,
        context: ResolveContext | None = None,
        field_selection: Mapping[str, Any] | None = None,
    ) -> dict[str, Any]:
        request = ResolveRequest(args, context or ResolveContext(), field_selection)
        return await Pipeline(self._middlewares).execute(request, self._handle)

    async def _handle(self, request: ResolveRequest) -> dict[str, Any]:
        context = request.context
        context.corrected_query = None
        args = merge_args(request.args, context.args, context.merge_policy)
        self._hooks.dispatch(HookPoint.ARGS_BEFORE, args)

        if args.get("redirect") or args.get("search") == "":
            return {"items": [], "total_count": 0}
        if args.get("search") is None and args.get("filter") is None:
            raise InvalidSearchRequestError()
        self._hooks.dispatch(HookPoint.ARGS_AFTER, args)

        debug = bool(args.get("debug"))
        search = args.get("search") or ""
        plan = self._builder.selection.plan(request.field_selection)
        executor = QueryExecutor(self._client)

        query = await self._builder.prepare_query(args, plan, executor, store_id=context.store_id)
        self._hooks.dispatch(HookPoint.EXECUTE_BEFORE, query)
        response = await query.get_response()

        if search and response.num_found == 0 and self._settings.spellcheck_enabled:
            original_input = args.get("query") or search
            corrected = await self._spellcheck.resolve(original_input, executor, store_id=context.store_id)
            if corrected:
                _log.info("catalog_search.spellcheck.corrected", original=original_input, corrected=corrected)
                corrected_args = {**args, "search": corrected}
                query = await self._builder.prepare_query(
                    corrected_args, plan, executor, store_id=context.store_id
                )
                self._hooks.dispatch(HookPoint.EXECUTE_BEFORE, query)
                response = await query.get_response()
                context.corrected_query = corrected

        self._hooks.dispatch(HookPoint.EXECUTE_AFTER, response)
        self._hooks.dispatch(HookPoint.RESULT_BEFORE, response)
        envelope = self._normalizer.prepare_result_data(response, debug)

        if search and self._recorder is not None:
            await self._recorder.record(search, envelope.total_count)
        if context.corrected_query is not None:
            envelope.corrected_query = context.corrected_query

        result = envelope.to_dict()
        self._hooks.dispatch(HookPoint.RESULT_AFTER, result)

        context.resolved_args = args
        context.result = result
        return result


__all__ = ["ProductsResolver", "ResolveContext", "ResolveRequest"]
