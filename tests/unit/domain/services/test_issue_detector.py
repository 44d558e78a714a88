from __future__ import annotations

import pytest

from healthboard.domain.entities.metrics import SystemResources
from healthboard.domain.entities.severity import Channel, Resource
from healthboard.domain.services.issue_detector import detect_issues
from healthboard.domain.services.severity_classifier import (
    SeverityClassifier,
    ThresholdTable,
)


@pytest.fixture()
def classifier() -> SeverityClassifier:
    return SeverityClassifier()


def test_healthy_reading_has_no_issues(healthy_reading, classifier) -> None:
    assert detect_issues(healthy_reading, classifier) == {
        Channel.API: [],
        Channel.DATABASE: [],
        Channel.NETWORK: [],
    }


def test_disconnected_dependencies_stay_on_their_channel(make_reading, classifier) -> None:
    issues = detect_issues(make_reading(db_ok=False, network_ok=False), classifier)

    assert issues[Channel.DATABASE] == ["Database disconnected"]
    assert issues[Channel.NETWORK] == ["Network unreachable"]
    assert issues[Channel.API] == []


def test_slow_signals(make_reading, classifier) -> None:
    issues = detect_issues(
        make_reading(
            db_latency_ms=750.0,
            network_latency_ms=1200.0,
            perf_ms=1500.0,
            cpu_pct=95.0,
            mem_pct=85.0,
        ),
        classifier,
    )

    assert issues[Channel.DATABASE] == ["Database slow: 750 ms"]
    assert issues[Channel.NETWORK] == ["Network slow: 1200 ms"]
    assert issues[Channel.API] == [
        "API very slow: 1500 ms",
        "CPU overloaded: 95.0%",
        "Memory high: 85.0%",
    ]


def test_critical_levels(make_reading, classifier) -> None:
    issues = detect_issues(make_reading(perf_ms=700.0, cpu_pct=80.0, mem_pct=95.0), classifier)

    assert issues[Channel.API] == [
        "API slow: 700 ms",
        "CPU high: 80.0%",
        "Memory critical: 95.0%",
    ]


def test_resource_levels_follow_configured_thresholds(make_reading) -> None:
    classifier = SeverityClassifier(
        {
            Resource.CPU: ThresholdTable.of((1, 2, 3, 5), unit="%"),
            Resource.MEMORY: ThresholdTable.of((1, 2, 10, 30), unit="%"),
        }
    )

    issues = detect_issues(make_reading(cpu_pct=12.0, mem_pct=20.0), classifier)

    assert issues[Channel.API] == ["CPU overloaded: 12.0%", "Memory high: 20.0%"]


def test_disk_usage(make_reading, classifier) -> None:
    resources = SystemResources(
        cpu_count=2, memory_used_mb=1, memory_total_mb=2, disk_usage_percent=97.0
    )
    issues = detect_issues(make_reading(resources=resources), classifier)
    assert issues[Channel.API] == ["Disk full: 97.0%"]
    assert issues[Channel.DATABASE] == []


def test_unavailable_signals_are_routed_and_sorted(make_reading, classifier) -> None:
    reading = make_reading(
        cpu_pct=None,
        mem_pct=None,
        db_ok=False,
        unavailable={"memory": "boom", "cpu": "boom", "database": "timed out"},
    )

    issues = detect_issues(reading, classifier)

    assert issues[Channel.API] == ["cpu unavailable: boom", "memory unavailable: boom"]
    assert issues[Channel.DATABASE] == [
        "Database disconnected",
        "database unavailable: timed out",
    ]
