from __future__ import annotations

from healthboard.application.dtos.health_dto import (
    HealthReportDTO,
    HealthScoreDTO,
    LightHealthDTO,
    MetricSampleDTO,
    PingDTO,
)
from healthboard.domain.entities.metrics import (
    ChannelStatus,
    HealthReport,
    HealthScore,
    LightHealthReport,
)
from healthboard.domain.entities.severity import Channel, Resource, SeverityBucket


def test_health_score_dto_from_domain() -> None:
    dto = HealthScoreDTO.from_domain(
        HealthScore(cpu_sub=22, memory_sub=20, perf_sub=24, network_sub=25)
    )
    assert dto.total == 91
    assert dto.severity is SeverityBucket.EXCELLENT
    assert dto.status_icon == "shield-check"


def test_health_report_dto_from_domain(healthy_reading, make_sample) -> None:
    sample = make_sample(0)
    report = HealthReport(
        reading=healthy_reading,
        score=HealthScore(cpu_sub=22, memory_sub=20, perf_sub=24, network_sub=25),
        channels={
            Channel.DATABASE: ChannelStatus(
                channel=Channel.DATABASE,
                severity=SeverityBucket.EXCELLENT,
                sample=sample,
            )
        },
        history={Channel.DATABASE: (sample,)},
        resource_severity={
            Resource.CPU: SeverityBucket.EXCELLENT,
            Resource.MEMORY: SeverityBucket.GOOD,
        },
    )

    dto = HealthReportDTO.from_domain(report, version="1.0")

    assert dto.version == "1.0"
    assert dto.score.total == 91
    assert dto.db_latency_ms == 5.0
    assert dto.resources is not None and dto.resources.cpu_count == 4
    assert dto.channels[Channel.DATABASE].sample == MetricSampleDTO.from_domain(sample)
    assert dto.history[Channel.API] == []
    assert len(dto.history[Channel.DATABASE]) == 1

    payload = dto.model_dump(mode="json")
    assert set(payload["history"]) == {"api", "db", "network"}
    assert payload["channels"]["db"]["severity"] == "excellent"
    assert payload["resource_severity"] == {"cpu": "excellent", "memory": "good"}


def test_degraded_health_report() -> None:
    dto = HealthReportDTO.degraded(version="1.0", reason="boom")

    assert dto.score.total == 0
    assert dto.score.severity is SeverityBucket.OVERLOAD
    assert dto.unavailable == {"diagnostics": "boom"}
    assert dto.resource_severity == {
        Resource.CPU: SeverityBucket.OVERLOAD,
        Resource.MEMORY: SeverityBucket.OVERLOAD,
    }
    assert all(
        status.severity is SeverityBucket.OVERLOAD for status in dto.channels.values()
    )


def test_light_health_dto(healthy_reading) -> None:
    report = LightHealthReport(
        checked_at=healthy_reading.sampled_at,
        db_ok=True,
        db_latency_ms=5.0,
        perf_ms=40.0,
        severity=SeverityBucket.EXCELLENT,
    )
    dto = LightHealthDTO.from_domain(report)
    assert dto.db_ok is True
    assert dto.severity is SeverityBucket.EXCELLENT

    degraded = LightHealthDTO.degraded()
    assert degraded.db_ok is False
    assert degraded.severity is SeverityBucket.OVERLOAD


def test_ping_dto() -> None:
    assert PingDTO().model_dump() == {"ok": True}
