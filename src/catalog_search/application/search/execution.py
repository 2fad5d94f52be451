"""Application search – request-scoped query execution."""
from __future__ import annotations

from catalog_search.application.search.ports import EngineClient
from catalog_search.application.search.query import QueryDescriptor
from catalog_search.application.search.response import EngineResponse


class QueryExecutor:
    """Executes descriptors against the engine, once per descriptor instance.

    One executor lives for one resolve call; responses are cached by
    descriptor identity and dropped with the executor.
    """

    def __init__(self, client: EngineClient) -> None:
        self._client = client
        self._responses: dict[int, tuple[QueryDescriptor, EngineResponse]] = {}

    async def execute(self, descriptor: QueryDescriptor) -> EngineResponse:
        cached = self._responses.get(id(descriptor))
        if cached is not None and cached[0] is descriptor:
            return cached[1]
        response = await self._client.execute(descriptor)
        # keep the descriptor alive so its id cannot be reused
        self._responses[id(descriptor)] = (descriptor, response)
        return response


class PreparedQuery:
    """A built query that stays inert until :meth:`get_response` is awaited."""

    def __init__(self, descriptor: QueryDescriptor, executor: QueryExecutor) -> None:
        self.descriptor = descriptor
        self._executor = executor

    async def get_response(self) -> EngineResponse:
        return await self._executor.execute(self.descriptor)


__all__ = ["PreparedQuery", "QueryExecutor"]
