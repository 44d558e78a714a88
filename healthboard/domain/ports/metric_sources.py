"""Abstractions for the signal sources read by the metric sampler."""

from __future__ import annotations

from datetime import datetime
from typing import Optional, Protocol

from healthboard.domain.entities.metrics import MetricReading, ProbeResult, SystemUsage


class ISystemMetricsSource(Protocol):
    """Reads host CPU and memory utilisation. May block."""

    def read(self) -> SystemUsage:
        ...


class IDatabaseProbe(Protocol):
    """Checks database reachability and round-trip latency."""

    async def ping(self) -> ProbeResult:
        ...


class INetworkProbe(Protocol):
    """Checks that the service is reachable over the network."""

    async def check(self) -> ProbeResult:
        ...


class ILatencySource(Protocol):
    """Recent request latency observed by the HTTP layer."""

    def average_ms(self) -> Optional[float]:
        ...


class IUptimeSource(Protocol):
    """Process start time and uptime."""

    @property
    def started_at(self) -> datetime:
        ...

    def uptime_seconds(self) -> float:
        ...


class IMetricSampler(Protocol):
    """Best-effort read of every signal; never raises for a failed read."""

    async def sample(self) -> MetricReading:
        ...

    async def sample_light(self) -> MetricReading:
        ...
