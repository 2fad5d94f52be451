"""Unit tests for the resolve middleware Pipeline."""

from __future__ import annotations

import asyncio
from typing import Any

import pytest

from catalog_search.application.pipeline import (
    LoggingMiddleware,
    Middleware,
    Pipeline,
    TimeoutMiddleware,
)
from catalog_search.kernel.errors import TimeoutError as AppTimeoutError


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def make_recording_middleware(name: str, record: list[str]) -> Middleware:
    class Rec(Middleware):
        async def __call__(self, request: object, next_: object) -> object:  # type: ignore[override]
            record.append(f"{name}:before")
            result = await next_(request)  # type: ignore[operator]
            record.append(f"{name}:after")
            return result

    return Rec()


async def identity_handler(request: object) -> object:
    return request


class RecordingLogger:
    def __init__(self) -> None:
        self.events: list[tuple[str, str, dict[str, Any]]] = []

    def info(self, event: str, **kw: Any) -> None:
        self.events.append(("info", event, kw))

    def error(self, event: str, **kw: Any) -> None:
        self.events.append(("error", event, kw))


class LoggableRequest:
    def log_fields(self) -> dict[str, Any]:
        return {"search": "red", "page_size": 20}


# ---------------------------------------------------------------------------
# Pipeline
# ---------------------------------------------------------------------------


class TestPipeline:
    def test_no_middleware_calls_handler(self) -> None:
        result = asyncio.run(Pipeline().execute("hello", identity_handler))
        assert result == "hello"

    def test_single_middleware_wraps(self) -> None:
        record: list[str] = []
        pipeline = Pipeline()
        pipeline.add(make_recording_middleware("A", record))

        result = asyncio.run(pipeline.execute("x", identity_handler))
        assert result == "x"
        assert record == ["A:before", "A:after"]

    def test_middleware_ordering_inside_out(self) -> None:
        record: list[str] = []
        pipeline = Pipeline(
            [make_recording_middleware("A", record), make_recording_middleware("B", record)]
        )

        asyncio.run(pipeline.execute("x", identity_handler))
        assert record == ["A:before", "B:before", "B:after", "A:after"]

    def test_fluent_add_returns_pipeline(self) -> None:
        record: list[str] = []
        pipeline = (
            Pipeline()
            .add(make_recording_middleware("A", record))
            .add(make_recording_middleware("B", record))
        )
        asyncio.run(pipeline.execute("x", identity_handler))
        assert record == ["A:before", "B:before", "B:after", "A:after"]

    def test_short_circuit_in_middleware(self) -> None:
        class ShortCircuit(Middleware):
            async def __call__(self, request: object, next_: object) -> str:  # type: ignore[override]
                return "short-circuited"

        pipeline = Pipeline().add(ShortCircuit())
        result = asyncio.run(pipeline.execute("ignored", identity_handler))
        assert result == "short-circuited"


# ---------------------------------------------------------------------------
# LoggingMiddleware
# ---------------------------------------------------------------------------


class TestLoggingMiddleware:
    def test_passes_through_result(self) -> None:
        result = asyncio.run(
            Pipeline().add(LoggingMiddleware()).execute("hello", identity_handler)
        )
        assert result == "hello"

    def test_propagates_exception(self) -> None:
        async def failing(req: object) -> object:
            raise ValueError("boom")

        with pytest.raises(ValueError, match="boom"):
            asyncio.run(Pipeline().add(LoggingMiddleware()).execute("x", failing))

    def test_logs_completion_with_request_fields(self) -> None:
        logger = RecordingLogger()
        asyncio.run(Pipeline().add(LoggingMiddleware(logger)).execute(LoggableRequest(), identity_handler))

        ((level, event, fields),) = logger.events
        assert level == "info"
        assert event == "catalog_search.resolve.completed"
        assert fields["request"] == "LoggableRequest"
        assert fields["search"] == "red"
        assert fields["page_size"] == 20
        assert fields["duration_ms"] >= 0

    def test_logs_failure(self) -> None:
        logger = RecordingLogger()

        async def failing(req: object) -> object:
            raise KeyError("missing")

        with pytest.raises(KeyError):
            asyncio.run(Pipeline().add(LoggingMiddleware(logger)).execute("x", failing))

        ((level, event, fields),) = logger.events
        assert level == "error"
        assert event == "catalog_search.resolve.failed"
        assert fields["error"] == "KeyError"


# ---------------------------------------------------------------------------
# TimeoutMiddleware
# ---------------------------------------------------------------------------


class TestTimeoutMiddleware:
    def test_fast_call_completes(self) -> None:
        result = asyncio.run(
            Pipeline().add(TimeoutMiddleware(timeout_seconds=5.0)).execute("x", identity_handler)
        )
        assert result == "x"

    def test_slow_call_raises_app_timeout(self) -> None:
        async def slow(req: object) -> object:
            await asyncio.sleep(10)
            return req

        with pytest.raises(AppTimeoutError, match="timed out"):
            asyncio.run(
                Pipeline().add(TimeoutMiddleware(timeout_seconds=0.001)).execute("x", slow)
            )
