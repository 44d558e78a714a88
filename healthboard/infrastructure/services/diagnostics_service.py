"""
Diagnostics orchestration - Infrastructure Layer

Owns the periodic sampling task that feeds the history store and serves
the request-driven health reports. The history store is shared with the
request handlers, which only read it.
"""

from __future__ import annotations

import asyncio
import contextlib
import dataclasses
from typing import Dict, List, Optional, Tuple

from healthboard.domain.entities.dashboard import ChannelRowView, StatusPageView, TickView
from healthboard.domain.entities.metrics import (
    ChannelStatus,
    HealthReport,
    HealthScore,
    LightHealthReport,
    MetricReading,
    MetricSample,
    utc_now,
)
from healthboard.domain.entities.severity import (
    TRACKED_CHANNELS,
    Channel,
    Resource,
    SeverityBucket,
)
from healthboard.domain.ports.diagnostics import IDiagnosticsService
from healthboard.domain.ports.metric_sources import IMetricSampler, IUptimeSource
from healthboard.domain.repositories.history_repository import IHistoryRepository
from healthboard.domain.services.issue_detector import detect_issues
from healthboard.domain.services.score_aggregator import ScoreAggregator
from healthboard.domain.services.severity_classifier import SeverityClassifier
from healthboard.shared import DEFAULT_SAMPLE_INTERVAL_SECONDS, get_logger

logger = get_logger(__name__)

CHANNEL_TITLES: Dict[Channel, str] = {
    Channel.API: "API performance",
    Channel.DATABASE: "Database",
    Channel.NETWORK: "Network",
}


def format_uptime(seconds: float) -> str:
    total = int(max(0.0, seconds))
    days, rest = divmod(total, 86400)
    hours, rest = divmod(rest, 3600)
    minutes = rest // 60
    if days:
        return f"{days}d {hours}h"
    if hours:
        return f"{hours}h {minutes}m"
    return f"{minutes}m"


def format_tooltip(sample: MetricSample) -> str:
    value = "unavailable" if sample.raw_value is None else f"{sample.raw_value:.0f} ms"
    issues = ", ".join(sample.issues) if sample.issues else "No issues"
    return f"{sample.timestamp:%H:%M} | {value} | {issues}"


class DiagnosticsService(IDiagnosticsService):
    """Timer-driven history sampling plus on-demand health reports."""

    def __init__(
        self,
        sampler: IMetricSampler,
        classifier: SeverityClassifier,
        aggregator: ScoreAggregator,
        history_store: IHistoryRepository,
        uptime: IUptimeSource,
        *,
        app_name: str = "healthboard",
        version: str = "0.0.0",
        interval_seconds: float = DEFAULT_SAMPLE_INTERVAL_SECONDS,
        initial_delay_seconds: float = 5.0,
    ) -> None:
        if interval_seconds <= 0:
            raise ValueError("interval_seconds must be positive")
        self._sampler = sampler
        self._classifier = classifier
        self._aggregator = aggregator
        self._history = history_store
        self._uptime = uptime
        self._app_name = app_name
        self._version = version
        self._interval = interval_seconds
        self._initial_delay = max(0.0, initial_delay_seconds)
        self._task: Optional[asyncio.Task] = None
        # Replaced wholesale by each tick, never mutated.
        self._latest: Optional[Tuple[MetricReading, HealthScore]] = None

    @property
    def history(self) -> IHistoryRepository:
        return self._history

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    async def start(self) -> None:
        if self.running:
            return
        self._task = asyncio.create_task(self._run(), name="diagnostics-sampler")
        logger.info(
            "diagnostics.sampler.started",
            interval_seconds=self._interval,
            capacity=self._history.capacity(),
        )

    async def stop(self) -> None:
        task, self._task = self._task, None
        if task is None:
            return
        task.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await task
        logger.info("diagnostics.sampler.stopped")

    async def _run(self) -> None:
        await asyncio.sleep(self._initial_delay)
        while True:
            try:
                await self.tick()
            except Exception as exc:
                logger.error("diagnostics.tick.failed", error=str(exc), exc_info=exc)
            await asyncio.sleep(self._interval)

    async def tick(self) -> Dict[Channel, MetricSample]:
        """Sample once and append one sample per tracked channel."""
        try:
            reading = await self._sampler.sample()
            samples = self.classify_reading(reading)
            self._latest = (reading, self._aggregator.score(reading))
        except Exception as exc:
            logger.error("diagnostics.sampling.failed", error=str(exc), exc_info=exc)
            samples = self._overload_samples(f"Sampling failed: {exc}")

        # Metrics are gathered before any window lock is taken.
        for channel, sample in samples.items():
            self._history.append(channel, self._not_older_than_history(channel, sample))

        logger.debug(
            "diagnostics.tick.completed",
            severities={channel.value: s.severity.value for channel, s in samples.items()},
        )
        return samples

    def _not_older_than_history(
        self, channel: Channel, sample: MetricSample
    ) -> MetricSample:
        window = self._history.snapshot(channel)
        if window and sample.timestamp < window[-1].timestamp:
            # Wall clock stepped back, keep the window ordered.
            logger.warning(
                "diagnostics.clock.stepped_back",
                channel=channel.value,
                sampled_at=sample.timestamp.isoformat(),
                newest=window[-1].timestamp.isoformat(),
            )
            return dataclasses.replace(sample, timestamp=window[-1].timestamp)
        return sample

    def classify_reading(self, reading: MetricReading) -> Dict[Channel, MetricSample]:
        issues = detect_issues(reading, self._classifier)
        samples: Dict[Channel, MetricSample] = {}
        for channel in TRACKED_CHANNELS:
            raw_value = reading.value_for(channel)
            samples[channel] = MetricSample(
                timestamp=reading.sampled_at,
                channel=channel,
                raw_value=raw_value,
                severity=self._classifier.classify(channel, raw_value),
                issues=tuple(issues[channel]),
            )
        return samples

    def _overload_samples(self, reason: str) -> Dict[Channel, MetricSample]:
        now = utc_now()
        return {
            channel: MetricSample(
                timestamp=now,
                channel=channel,
                raw_value=None,
                severity=SeverityBucket.OVERLOAD,
                issues=(reason,),
            )
            for channel in TRACKED_CHANNELS
        }

    def history_snapshot(self) -> Dict[Channel, Tuple[MetricSample, ...]]:
        return {channel: self._history.snapshot(channel) for channel in TRACKED_CHANNELS}

    async def health_report(self) -> HealthReport:
        reading = await self._sampler.sample()
        score = self._aggregator.score(reading)
        channels = {
            channel: ChannelStatus(channel=channel, severity=sample.severity, sample=sample)
            for channel, sample in self.classify_reading(reading).items()
        }
        return HealthReport(
            reading=reading,
            score=score,
            channels=channels,
            history=self.history_snapshot(),
            resource_severity={
                Resource.CPU: self._classifier.classify(Resource.CPU, reading.cpu_pct),
                Resource.MEMORY: self._classifier.classify(Resource.MEMORY, reading.mem_pct),
            },
        )

    async def light_report(self) -> LightHealthReport:
        reading = await self._sampler.sample_light()
        db_value = reading.value_for(Channel.DATABASE)
        severity = SeverityBucket.worst(
            self._classifier.classify(Channel.DATABASE, db_value),
            self._classifier.classify(Channel.API, reading.perf_ms),
        )
        return LightHealthReport(
            checked_at=reading.sampled_at,
            db_ok=reading.db_ok,
            db_latency_ms=db_value,
            perf_ms=reading.perf_ms,
            severity=severity,
        )

    async def status_page(self) -> StatusPageView:
        latest = self._latest
        if latest is None:
            reading = await self._sampler.sample()
            latest = (reading, self._aggregator.score(reading))
        reading, score = latest

        current = self.classify_reading(reading)
        rows: List[ChannelRowView] = []
        for channel, samples in self.history_snapshot().items():
            rows.append(
                ChannelRowView(
                    channel=channel,
                    title=CHANNEL_TITLES[channel],
                    current=samples[-1].severity if samples else current[channel].severity,
                    ticks=[
                        TickView(severity=sample.severity, tooltip=format_tooltip(sample))
                        for sample in samples
                    ],
                )
            )

        load = reading.resources.load_average if reading.resources else None
        return StatusPageView(
            api_name=self._app_name,
            version=self._version,
            generated_at=utc_now(),
            score=score,
            rows=rows,
            perf_ms=reading.perf_ms,
            uptime_text=format_uptime(self._uptime.uptime_seconds()),
            load_average=f"{load[0]:.2f}" if load else "n/a",
            history_capacity=self._history.capacity(),
        )
