from __future__ import annotations

import sys
from datetime import datetime, timedelta, timezone
from pathlib import Path
from typing import Any, Callable, Optional

import pytest

from healthboard.domain.entities.metrics import (
    MetricReading,
    MetricSample,
    SystemResources,
)
from healthboard.domain.entities.severity import Channel, SeverityBucket

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

BASE_TIME = datetime(2024, 9, 9, 12, 0, tzinfo=timezone.utc)


@pytest.fixture()
def sample_resources() -> SystemResources:
    return SystemResources(
        cpu_count=4,
        memory_used_mb=1600,
        memory_total_mb=8000,
        disk_usage_percent=40.0,
        load_average=(0.52, 0.41, 0.3),
        host_uptime_seconds=86400.0,
    )


@pytest.fixture()
def make_reading(sample_resources: SystemResources) -> Callable[..., MetricReading]:
    """Healthy reading (score 22 + 20 + 24 + 25 = 91) with overrides."""

    def _make(**overrides: Any) -> MetricReading:
        values: dict = {
            "sampled_at": BASE_TIME,
            "cpu_pct": 12.0,
            "mem_pct": 20.0,
            "perf_ms": 40.0,
            "network_ok": True,
            "network_latency_ms": 3.0,
            "db_ok": True,
            "db_latency_ms": 5.0,
            "resources": sample_resources,
        }
        values.update(overrides)
        return MetricReading(**values)

    return _make


@pytest.fixture()
def healthy_reading(make_reading: Callable[..., MetricReading]) -> MetricReading:
    return make_reading()


@pytest.fixture()
def make_sample() -> Callable[..., MetricSample]:
    """Build the n-th sample of a channel, one minute apart."""

    def _make(
        index: int = 0,
        channel: Channel = Channel.DATABASE,
        severity: SeverityBucket = SeverityBucket.EXCELLENT,
        raw_value: Optional[float] = 5.0,
    ) -> MetricSample:
        return MetricSample(
            timestamp=BASE_TIME + timedelta(minutes=index),
            channel=channel,
            raw_value=raw_value,
            severity=severity,
        )

    return _make
