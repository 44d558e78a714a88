"""DTOs for the diagnostics endpoints."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Dict, List, Optional, Tuple

from pydantic import BaseModel, Field

from healthboard.domain.entities.metrics import (
    HealthReport,
    HealthScore,
    LightHealthReport,
    MetricSample,
    SystemResources,
)
from healthboard.domain.entities.severity import (
    TRACKED_CHANNELS,
    Channel,
    Resource,
    SeverityBucket,
)


class HealthScoreDTO(BaseModel):
    """Composite score and its four components."""

    cpu_sub: int = Field(ge=0, le=25, description="CPU sub-score")
    memory_sub: int = Field(ge=0, le=25, description="Memory sub-score")
    perf_sub: int = Field(ge=0, le=25, description="Request performance sub-score")
    network_sub: int = Field(ge=0, le=25, description="Network sub-score")
    total: int = Field(ge=0, le=100, description="Sum of the four sub-scores")
    severity: SeverityBucket = Field(description="Status band of the total")
    status_label: str
    status_color: str
    status_icon: str

    @classmethod
    def from_domain(cls, score: HealthScore) -> "HealthScoreDTO":
        return cls(
            cpu_sub=score.cpu_sub,
            memory_sub=score.memory_sub,
            perf_sub=score.perf_sub,
            network_sub=score.network_sub,
            total=score.total,
            severity=score.severity,
            status_label=score.status_label,
            status_color=score.status_color,
            status_icon=score.status_icon,
        )


class MetricSampleDTO(BaseModel):
    """One history entry."""

    timestamp: datetime
    severity: SeverityBucket
    raw_value: Optional[float] = Field(
        default=None, description="Latency in milliseconds, null when unavailable"
    )
    issues: List[str] = Field(default_factory=list)

    @classmethod
    def from_domain(cls, sample: MetricSample) -> "MetricSampleDTO":
        return cls(
            timestamp=sample.timestamp,
            severity=sample.severity,
            raw_value=sample.raw_value,
            issues=list(sample.issues),
        )


class ChannelStatusDTO(BaseModel):
    """Current severity of a channel with the sample it came from."""

    severity: SeverityBucket
    sample: Optional[MetricSampleDTO] = None


class SystemResourcesDTO(BaseModel):
    cpu_count: int
    memory_used_mb: int
    memory_total_mb: int
    disk_usage_percent: Optional[float] = None
    load_average: Optional[Tuple[float, float, float]] = None
    host_uptime_seconds: Optional[float] = None

    @classmethod
    def from_domain(cls, resources: SystemResources) -> "SystemResourcesDTO":
        return cls(
            cpu_count=resources.cpu_count,
            memory_used_mb=resources.memory_used_mb,
            memory_total_mb=resources.memory_total_mb,
            disk_usage_percent=resources.disk_usage_percent,
            load_average=resources.load_average,
            host_uptime_seconds=resources.host_uptime_seconds,
        )


def _history_dto(
    history: Dict[Channel, Tuple[MetricSample, ...]],
) -> Dict[Channel, List[MetricSampleDTO]]:
    return {
        channel: [MetricSampleDTO.from_domain(sample) for sample in history.get(channel, ())]
        for channel in TRACKED_CHANNELS
    }


class HealthReportDTO(BaseModel):
    """DTO representing the /help/health response payload."""

    timestamp: datetime
    version: str
    score: HealthScoreDTO
    channels: Dict[Channel, ChannelStatusDTO]
    history: Dict[Channel, List[MetricSampleDTO]]
    resource_severity: Dict[Resource, SeverityBucket] = Field(
        default_factory=dict, description="Severity of the host CPU and memory usage"
    )
    cpu_pct: Optional[float] = None
    mem_pct: Optional[float] = None
    perf_ms: Optional[float] = None
    network_ok: bool = False
    db_ok: bool = False
    db_latency_ms: Optional[float] = None
    db_error: Optional[str] = None
    resources: Optional[SystemResourcesDTO] = None
    unavailable: Dict[str, str] = Field(default_factory=dict)

    @classmethod
    def from_domain(cls, report: HealthReport, version: str) -> "HealthReportDTO":
        reading = report.reading
        return cls(
            timestamp=reading.sampled_at,
            version=version,
            score=HealthScoreDTO.from_domain(report.score),
            channels={
                channel: ChannelStatusDTO(
                    severity=status.severity,
                    sample=MetricSampleDTO.from_domain(status.sample),
                )
                for channel, status in report.channels.items()
            },
            history=_history_dto(report.history),
            resource_severity=dict(report.resource_severity),
            cpu_pct=reading.cpu_pct,
            mem_pct=reading.mem_pct,
            perf_ms=reading.perf_ms,
            network_ok=reading.network_ok,
            db_ok=reading.db_ok,
            db_latency_ms=reading.db_latency_ms,
            db_error=reading.db_error,
            resources=(
                SystemResourcesDTO.from_domain(reading.resources)
                if reading.resources
                else None
            ),
            unavailable=dict(reading.unavailable),
        )

    @classmethod
    def degraded(
        cls,
        version: str,
        reason: str,
        history: Optional[Dict[Channel, Tuple[MetricSample, ...]]] = None,
    ) -> "HealthReportDTO":
        """Worst-case payload used when the report itself could not be built."""
        return cls(
            timestamp=datetime.now(timezone.utc),
            version=version,
            score=HealthScoreDTO.from_domain(HealthScore.zero()),
            channels={
                channel: ChannelStatusDTO(severity=SeverityBucket.OVERLOAD)
                for channel in TRACKED_CHANNELS
            },
            history=_history_dto(history or {}),
            resource_severity={resource: SeverityBucket.OVERLOAD for resource in Resource},
            unavailable={"diagnostics": reason},
        )

    model_config = {
        "json_schema_extra": {
            "example": {
                "timestamp": "2024-09-09T12:00:00Z",
                "version": "0.1.0",
                "score": {
                    "cpu_sub": 22,
                    "memory_sub": 20,
                    "perf_sub": 24,
                    "network_sub": 25,
                    "total": 91,
                    "severity": "excellent",
                    "status_label": "Excellent",
                    "status_color": "success",
                    "status_icon": "shield-check",
                },
                "channels": {
                    "db": {
                        "severity": "excellent",
                        "sample": {
                            "timestamp": "2024-09-09T12:00:00Z",
                            "severity": "excellent",
                            "raw_value": 5.0,
                            "issues": [],
                        },
                    }
                },
                "history": {"api": [], "db": [], "network": []},
                "resource_severity": {"cpu": "excellent", "memory": "excellent"},
                "db_ok": True,
                "db_latency_ms": 5.0,
            }
        }
    }


class LightHealthDTO(BaseModel):
    """DTO representing the /help/health-light response payload."""

    timestamp: datetime
    db_ok: bool
    db_latency_ms: Optional[float] = None
    perf_ms: Optional[float] = None
    severity: SeverityBucket

    @classmethod
    def from_domain(cls, report: LightHealthReport) -> "LightHealthDTO":
        return cls(
            timestamp=report.checked_at,
            db_ok=report.db_ok,
            db_latency_ms=report.db_latency_ms,
            perf_ms=report.perf_ms,
            severity=report.severity,
        )

    @classmethod
    def degraded(cls) -> "LightHealthDTO":
        return cls(
            timestamp=datetime.now(timezone.utc),
            db_ok=False,
            severity=SeverityBucket.OVERLOAD,
        )


class PingDTO(BaseModel):
    """DTO representing the /help/ping response payload."""

    ok: bool = True
