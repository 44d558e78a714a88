from __future__ import annotations

import asyncio
from typing import Optional

import pytest

from healthboard.domain.entities.errors import MetricUnavailable
from healthboard.domain.entities.metrics import ProbeResult, SystemUsage
from healthboard.infrastructure.services.metric_sampler import SKIPPED, MetricSampler


class _StubSystemMetrics:
    def __init__(self, usage: Optional[SystemUsage] = None, error: Exception | None = None):
        self.usage = usage or SystemUsage(cpu_pct=12.0, mem_pct=20.0)
        self.error = error
        self.calls = 0

    def read(self) -> SystemUsage:
        self.calls += 1
        if self.error is not None:
            raise self.error
        return self.usage


class _StubProbe:
    def __init__(
        self,
        result: ProbeResult = ProbeResult(ok=True, latency_ms=5.0),
        delay: float = 0.0,
    ):
        self.result = result
        self.delay = delay

    async def _answer(self) -> ProbeResult:
        if self.delay:
            await asyncio.sleep(self.delay)
        return self.result

    async def ping(self) -> ProbeResult:
        return await self._answer()

    async def check(self) -> ProbeResult:
        return await self._answer()


class _StubLatency:
    def __init__(self, average: Optional[float] = None, error: Exception | None = None):
        self.average = average
        self.error = error

    def average_ms(self) -> Optional[float]:
        if self.error is not None:
            raise self.error
        return self.average


def _sampler(
    system=None, database=None, network=None, latency=None, read_timeout=2.0
) -> MetricSampler:
    return MetricSampler(
        system_metrics=system or _StubSystemMetrics(),
        database_probe=database or _StubProbe(),
        network_probe=network or _StubProbe(ProbeResult(ok=True, latency_ms=3.0)),
        latency_source=latency or _StubLatency(40.0),
        read_timeout=read_timeout,
    )


@pytest.mark.asyncio
async def test_sample_reads_every_signal() -> None:
    reading = await _sampler().sample()

    assert reading.cpu_pct == 12.0
    assert reading.mem_pct == 20.0
    assert reading.perf_ms == 40.0
    assert reading.db_ok is True
    assert reading.db_latency_ms == 5.0
    assert reading.network_ok is True
    assert reading.network_latency_ms == 3.0
    assert reading.unavailable == {}


@pytest.mark.asyncio
async def test_slow_database_times_out_without_blocking_others() -> None:
    sampler = _sampler(database=_StubProbe(delay=1.0), read_timeout=0.05)

    reading = await sampler.sample()

    assert reading.db_ok is False
    assert reading.db_latency_ms is None
    assert reading.unavailable["database"] == "timed out after 0.05s"
    assert reading.cpu_pct == 12.0
    assert reading.network_ok is True


@pytest.mark.asyncio
async def test_system_failure_marks_cpu_and_memory_unavailable() -> None:
    system = _StubSystemMetrics(error=MetricUnavailable("system", "access denied"))

    reading = await _sampler(system=system).sample()

    assert reading.cpu_pct is None
    assert reading.mem_pct is None
    assert reading.unavailable["cpu"] == "access denied"
    assert reading.unavailable["memory"] == "access denied"
    assert reading.db_ok is True


@pytest.mark.asyncio
async def test_unexpected_error_is_reported_as_unavailable() -> None:
    system = _StubSystemMetrics(error=RuntimeError("boom"))

    reading = await _sampler(system=system).sample()

    assert reading.unavailable["cpu"] == "boom"


@pytest.mark.asyncio
async def test_unreachable_network_is_not_an_unavailable_signal() -> None:
    network = _StubProbe(ProbeResult(ok=False, error="HTTP 503"))

    reading = await _sampler(network=network).sample()

    assert reading.network_ok is False
    assert reading.network_latency_ms is None
    assert "network" not in reading.unavailable


@pytest.mark.asyncio
async def test_database_down_keeps_error() -> None:
    database = _StubProbe(ProbeResult(ok=False, error="MongoDB ping failed: refused"))

    reading = await _sampler(database=database).sample()

    assert reading.db_ok is False
    assert reading.db_error == "MongoDB ping failed: refused"


@pytest.mark.asyncio
async def test_no_request_yet_means_zero_latency() -> None:
    reading = await _sampler(latency=_StubLatency(None)).sample()
    assert reading.perf_ms == 0.0


@pytest.mark.asyncio
async def test_latency_source_failure_marks_performance_unavailable() -> None:
    reading = await _sampler(latency=_StubLatency(error=RuntimeError("gone"))).sample()
    assert reading.perf_ms is None
    assert reading.unavailable["performance"] == "gone"


@pytest.mark.asyncio
async def test_sample_light_reads_database_and_performance_only() -> None:
    system = _StubSystemMetrics()

    reading = await _sampler(system=system).sample_light()

    assert system.calls == 0
    assert reading.db_ok is True
    assert reading.perf_ms == 40.0
    assert reading.cpu_pct is None
    assert reading.unavailable == {
        "cpu": SKIPPED,
        "memory": SKIPPED,
        "network": SKIPPED,
    }


def test_read_timeout_must_be_positive() -> None:
    with pytest.raises(ValueError):
        _sampler(read_timeout=0)
