"""HTTP middleware feeding the request latency signal."""

from time import perf_counter
from typing import Awaitable, Callable

from fastapi import FastAPI, Request, Response

from healthboard.infrastructure.services.runtime_clock import RequestLatencyTracker
from healthboard.shared import get_logger

logger = get_logger(__name__)


def install_request_timing(app: FastAPI, tracker: RequestLatencyTracker) -> None:
    """Record the duration of every request into ``tracker``."""

    @app.middleware("http")
    async def record_request_latency(
        request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        start = perf_counter()
        try:
            return await call_next(request)
        finally:
            duration_ms = (perf_counter() - start) * 1000
            tracker.record(duration_ms)
            logger.debug(
                "http.request.completed",
                path=request.url.path,
                duration_ms=round(duration_ms, 2),
            )
