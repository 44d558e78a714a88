"""Database and network reachability probes."""

from __future__ import annotations

import asyncio
from time import perf_counter
from typing import Optional

import httpx
from pymongo.errors import PyMongoError

from healthboard.domain.entities.metrics import ProbeResult
from healthboard.domain.ports.metric_sources import IDatabaseProbe, INetworkProbe
from healthboard.infrastructure.database.mongo_database import MongoDatabase


class MongoDatabaseProbe(IDatabaseProbe):
    """Pings MongoDB and measures the round trip."""

    def __init__(self, mongo_database: Optional[MongoDatabase]) -> None:
        self._mongo_database = mongo_database

    async def ping(self) -> ProbeResult:
        if self._mongo_database is None:
            return ProbeResult(ok=False, error="Mongo database client not configured.")

        start = perf_counter()
        try:
            await asyncio.to_thread(self._mongo_database.ping)
        except PyMongoError as exc:
            return ProbeResult(ok=False, error=f"MongoDB ping failed: {exc}")
        return ProbeResult(ok=True, latency_ms=(perf_counter() - start) * 1000)


class HttpNetworkProbe(INetworkProbe):
    """GETs a URL (by default the service's own ping route)."""

    def __init__(self, url: str, *, http_timeout: float = 2.0) -> None:
        self._url = url
        self._http_timeout = http_timeout

    @property
    def url(self) -> str:
        return self._url

    async def check(self) -> ProbeResult:
        if not self._url:
            return ProbeResult(ok=False, error="Network probe URL not configured.")

        start = perf_counter()
        try:
            async with httpx.AsyncClient(timeout=self._http_timeout) as client:
                response = await client.get(self._url)
        except httpx.HTTPError as exc:
            return ProbeResult(ok=False, error=f"HTTP request failed: {exc}")

        latency_ms = (perf_counter() - start) * 1000
        if response.is_success:
            return ProbeResult(ok=True, latency_ms=latency_ms)
        return ProbeResult(
            ok=False,
            latency_ms=latency_ms,
            error=f"HTTP {response.status_code}",
        )
