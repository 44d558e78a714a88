"""Composite health score computation."""

from __future__ import annotations

from typing import Optional

from healthboard.domain.entities.metrics import SUB_SCORE_MAX, HealthScore, MetricReading

DEFAULT_PERF_CEILING_MS = 1000.0
DEFAULT_DB_LATENCY_BUDGET_MS = 100.0


def _clamp(value: float, low: float = 0.0, high: float = 1.0) -> float:
    return max(low, min(high, value))


def _to_sub_score(fraction: float) -> int:
    # Nearest integer, ties to even: 22.5 -> 22, 23.75 -> 24.
    return max(0, min(SUB_SCORE_MAX, round(SUB_SCORE_MAX * _clamp(fraction))))


class ScoreAggregator:
    """Turns a metric reading into four 0-25 sub-scores.

    Unavailable signals score 0 so a degraded reading never inflates the
    total.
    """

    def __init__(
        self,
        perf_ceiling_ms: float = DEFAULT_PERF_CEILING_MS,
        db_latency_budget_ms: float = DEFAULT_DB_LATENCY_BUDGET_MS,
    ):
        if perf_ceiling_ms <= 0:
            raise ValueError("perf_ceiling_ms must be positive")
        if db_latency_budget_ms <= 0:
            raise ValueError("db_latency_budget_ms must be positive")
        self._perf_ceiling_ms = perf_ceiling_ms
        self._db_latency_budget_ms = db_latency_budget_ms

    def score(self, reading: MetricReading) -> HealthScore:
        return HealthScore(
            cpu_sub=self.usage_sub_score(reading.cpu_pct),
            memory_sub=self.usage_sub_score(reading.mem_pct),
            perf_sub=self.perf_sub_score(reading.perf_ms),
            network_sub=self.network_sub_score(reading),
        )

    def usage_sub_score(self, usage_pct: Optional[float]) -> int:
        if usage_pct is None:
            return 0
        return _to_sub_score(1.0 - usage_pct / 100.0)

    def perf_sub_score(self, perf_ms: Optional[float]) -> int:
        if perf_ms is None:
            return 0
        return _to_sub_score(1.0 - perf_ms / self._perf_ceiling_ms)

    def network_sub_score(self, reading: MetricReading) -> int:
        if not (reading.network_ok and reading.db_ok):
            return 0
        latency = reading.db_latency_ms
        if latency is None:
            return 0
        if latency <= self._db_latency_budget_ms:
            return SUB_SCORE_MAX
        return _to_sub_score(self._db_latency_budget_ms / latency)
