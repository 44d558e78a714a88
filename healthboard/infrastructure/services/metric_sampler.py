"""Best-effort collection of every diagnostics signal."""

from __future__ import annotations

import asyncio
from typing import Any, Awaitable, Callable, Dict, Optional, TypeVar, Union

from healthboard.domain.entities.errors import MetricUnavailable, SamplingTimeout
from healthboard.domain.entities.metrics import (
    MetricReading,
    ProbeResult,
    SystemUsage,
    utc_now,
)
from healthboard.domain.ports.metric_sources import (
    IDatabaseProbe,
    ILatencySource,
    IMetricSampler,
    INetworkProbe,
    ISystemMetricsSource,
)
from healthboard.shared import DEFAULT_READ_TIMEOUT_SECONDS, get_logger

logger = get_logger(__name__)

T = TypeVar("T")

SKIPPED = "skipped by light check"


class MetricSampler(IMetricSampler):
    """Reads all signals concurrently, each bounded by a timeout.

    A failed or slow read is reported in ``MetricReading.unavailable``
    instead of being raised.
    """

    def __init__(
        self,
        system_metrics: ISystemMetricsSource,
        database_probe: IDatabaseProbe,
        network_probe: INetworkProbe,
        latency_source: ILatencySource,
        *,
        read_timeout: float = DEFAULT_READ_TIMEOUT_SECONDS,
    ) -> None:
        if read_timeout <= 0:
            raise ValueError("read_timeout must be positive")
        self._system_metrics = system_metrics
        self._database_probe = database_probe
        self._network_probe = network_probe
        self._latency_source = latency_source
        self._read_timeout = read_timeout

    async def sample(self) -> MetricReading:
        sampled_at = utc_now()
        system, database, network = await asyncio.gather(
            self._guarded("system", lambda: asyncio.to_thread(self._system_metrics.read)),
            self._guarded("database", self._database_probe.ping),
            self._guarded("network", self._network_probe.check),
        )
        unavailable: Dict[str, str] = {}
        fields: Dict[str, Any] = {}
        fields.update(self._system_fields(system, unavailable))
        fields.update(self._database_fields(database, unavailable))
        fields.update(self._network_fields(network, unavailable))
        fields["perf_ms"] = self._read_perf(unavailable)

        reading = MetricReading(sampled_at=sampled_at, unavailable=unavailable, **fields)
        if unavailable:
            logger.warning("sampler.degraded", unavailable=unavailable)
        return reading

    async def sample_light(self) -> MetricReading:
        sampled_at = utc_now()
        database = await self._guarded("database", self._database_probe.ping)
        unavailable: Dict[str, str] = {}
        fields = self._database_fields(database, unavailable)
        perf_ms = self._read_perf(unavailable)
        for signal in ("cpu", "memory", "network"):
            unavailable[signal] = SKIPPED
        return MetricReading(
            sampled_at=sampled_at, perf_ms=perf_ms, unavailable=unavailable, **fields
        )

    async def _guarded(
        self, signal: str, read: Callable[[], Awaitable[T]]
    ) -> Union[T, MetricUnavailable]:
        try:
            return await asyncio.wait_for(read(), timeout=self._read_timeout)
        except asyncio.TimeoutError:
            return SamplingTimeout(signal, self._read_timeout)
        except MetricUnavailable as exc:
            return exc
        except Exception as exc:
            logger.warning("sampler.read.failed", signal=signal, error=str(exc))
            return MetricUnavailable(signal, str(exc) or type(exc).__name__)

    def _read_perf(self, unavailable: Dict[str, str]) -> Optional[float]:
        try:
            average = self._latency_source.average_ms()
        except Exception as exc:
            unavailable["performance"] = str(exc) or type(exc).__name__
            return None
        # No completed request yet: nothing slow has been observed.
        return 0.0 if average is None else average

    @staticmethod
    def _system_fields(
        result: Union[SystemUsage, MetricUnavailable], unavailable: Dict[str, str]
    ) -> Dict[str, Any]:
        if isinstance(result, MetricUnavailable):
            unavailable["cpu"] = result.reason
            unavailable["memory"] = result.reason
            return {}
        return {
            "cpu_pct": result.cpu_pct,
            "mem_pct": result.mem_pct,
            "resources": result.resources,
        }

    @staticmethod
    def _database_fields(
        result: Union[ProbeResult, MetricUnavailable], unavailable: Dict[str, str]
    ) -> Dict[str, Any]:
        if isinstance(result, MetricUnavailable):
            unavailable["database"] = result.reason
            return {"db_ok": False, "db_error": result.reason}
        return {
            "db_ok": result.ok,
            "db_latency_ms": result.latency_ms if result.ok else None,
            "db_error": result.error,
        }

    @staticmethod
    def _network_fields(
        result: Union[ProbeResult, MetricUnavailable], unavailable: Dict[str, str]
    ) -> Dict[str, Any]:
        if isinstance(result, MetricUnavailable):
            unavailable["network"] = result.reason
            return {"network_ok": False}
        return {
            "network_ok": result.ok,
            "network_latency_ms": result.latency_ms if result.ok else None,
        }
