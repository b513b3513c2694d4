from __future__ import annotations

import uuid
from collections.abc import Iterable
from time import perf_counter
from typing import Any, Callable

import structlog
from starlette.datastructures import MutableHeaders

from registry.observability.metrics import get_metrics


class RequestContextMiddleware:
    """Binds a request id to structlog context, echoes it as ``X-Request-ID``
    and records one access log line plus latency per request."""

    def __init__(self, app: Callable[..., Any], excluded_metric_paths: Iterable[str] = ()) -> None:
        self.app = app
        self.excluded_metric_paths = frozenset(excluded_metric_paths)

    async def __call__(self, scope: dict[str, Any], receive: Callable[..., Any], send: Callable[..., Any]) -> None:
        if scope.get("type") != "http":
            await self.app(scope, receive, send)
            return

        request_id = str(uuid.uuid4())
        path = scope.get("path")
        client = scope.get("client")

        structlog.contextvars.bind_contextvars(
            request_id=request_id,
            method=scope.get("method"),
            path=path,
            client=client[0] if client else None,
        )

        started = perf_counter()
        status_code = 500

        async def send_with_request_id(message: dict[str, Any]) -> None:
            nonlocal status_code
            if message.get("type") == "http.response.start":
                status_code = int(message.get("status", 500))
                MutableHeaders(scope=message)["X-Request-ID"] = request_id
            await send(message)

        try:
            await self.app(scope, receive, send_with_request_id)
        finally:
            elapsed_ms = (perf_counter() - started) * 1000.0
            if path not in self.excluded_metric_paths:
                get_metrics().observe_http_request(elapsed_ms=elapsed_ms)

            structlog.get_logger("access").info(
                "http_request",
                status_code=status_code,
                elapsed_ms=round(elapsed_ms, 2),
            )
            structlog.contextvars.clear_contextvars()
