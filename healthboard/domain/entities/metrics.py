"""
Metric domain entities.

Value objects produced by the sampler, the score aggregator and the
history store. All of them are immutable once built.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Dict, Mapping, Optional, Tuple

from healthboard.domain.entities.severity import Channel, Resource, SeverityBucket

SUB_SCORE_MAX = 25


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True, slots=True)
class SystemResources:
    """Host snapshot read alongside the CPU and memory percentages."""

    cpu_count: int
    memory_used_mb: int
    memory_total_mb: int
    disk_usage_percent: Optional[float] = None
    load_average: Optional[Tuple[float, float, float]] = None
    host_uptime_seconds: Optional[float] = None


@dataclass(frozen=True, slots=True)
class SystemUsage:
    """Result of one read of the system metrics source."""

    cpu_pct: float
    mem_pct: float
    resources: Optional[SystemResources] = None


@dataclass(frozen=True, slots=True)
class ProbeResult:
    """Reachability answer from the database or network probe."""

    ok: bool
    latency_ms: Optional[float] = None
    error: Optional[str] = None


@dataclass(frozen=True, slots=True)
class MetricReading:
    """
    One best-effort read of every signal.

    ``None`` marks a signal that could not be read; the reason is kept in
    ``unavailable`` under the signal name.
    """

    sampled_at: datetime = field(default_factory=utc_now)
    cpu_pct: Optional[float] = None
    mem_pct: Optional[float] = None
    perf_ms: Optional[float] = None
    network_ok: bool = False
    network_latency_ms: Optional[float] = None
    db_ok: bool = False
    db_latency_ms: Optional[float] = None
    db_error: Optional[str] = None
    resources: Optional[SystemResources] = None
    unavailable: Mapping[str, str] = field(default_factory=dict)

    def value_for(self, channel: Channel) -> Optional[float]:
        """Raw value recorded for a tracked channel, ``None`` if down."""
        if channel is Channel.API:
            return self.perf_ms
        if channel is Channel.DATABASE:
            return self.db_latency_ms if self.db_ok else None
        return self.network_latency_ms if self.network_ok else None


@dataclass(frozen=True, slots=True)
class MetricSample:
    """A classified point of one channel's history."""

    timestamp: datetime
    channel: Channel
    raw_value: Optional[float]
    severity: SeverityBucket
    issues: Tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class HealthScore:
    """
    Composite 0-100 health score.

    ``total`` is derived from the four sub-scores and is never stored
    separately, so it cannot drift from their sum.
    """

    cpu_sub: int
    memory_sub: int
    perf_sub: int
    network_sub: int

    def __post_init__(self) -> None:
        for name in ("cpu_sub", "memory_sub", "perf_sub", "network_sub"):
            value = getattr(self, name)
            if not 0 <= value <= SUB_SCORE_MAX:
                raise ValueError(f"{name} must be within 0..{SUB_SCORE_MAX}, got {value}")

    @property
    def total(self) -> int:
        return self.cpu_sub + self.memory_sub + self.perf_sub + self.network_sub

    @property
    def severity(self) -> SeverityBucket:
        return SeverityBucket.from_score(self.total)

    @property
    def status_label(self) -> str:
        return self.severity.label

    @property
    def status_color(self) -> str:
        return self.severity.color

    @property
    def status_icon(self) -> str:
        return self.severity.icon

    @classmethod
    def zero(cls) -> "HealthScore":
        return cls(cpu_sub=0, memory_sub=0, perf_sub=0, network_sub=0)


@dataclass(frozen=True, slots=True)
class ChannelStatus:
    """Current severity of a channel, computed from a fresh reading."""

    channel: Channel
    severity: SeverityBucket
    sample: MetricSample


@dataclass(frozen=True, slots=True)
class HealthReport:
    """Everything the deep health check returns."""

    reading: MetricReading
    score: HealthScore
    channels: Dict[Channel, ChannelStatus]
    history: Dict[Channel, Tuple[MetricSample, ...]]
    resource_severity: Dict[Resource, SeverityBucket] = field(default_factory=dict)


@dataclass(frozen=True, slots=True)
class LightHealthReport:
    """Shallow check: database and request performance only."""

    checked_at: datetime
    db_ok: bool
    db_latency_ms: Optional[float]
    perf_ms: Optional[float]
    severity: SeverityBucket
