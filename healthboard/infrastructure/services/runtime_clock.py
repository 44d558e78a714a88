"""Process-level signals: request latency and uptime."""

from __future__ import annotations

import threading
from collections import deque
from datetime import datetime, timezone
from time import monotonic
from typing import Deque, Optional

from healthboard.domain.ports.metric_sources import ILatencySource, IUptimeSource


class RequestLatencyTracker(ILatencySource):
    """Rolling mean of the most recent request durations.

    Written by the HTTP middleware, read by the sampler.
    """

    def __init__(self, window: int = 5) -> None:
        if window <= 0:
            raise ValueError("window must be positive")
        self._durations: Deque[float] = deque(maxlen=window)
        self._lock = threading.Lock()

    def record(self, duration_ms: float) -> None:
        with self._lock:
            self._durations.append(max(0.0, duration_ms))

    def average_ms(self) -> Optional[float]:
        with self._lock:
            if not self._durations:
                return None
            return sum(self._durations) / len(self._durations)


class UptimeClock(IUptimeSource):
    """Remembers when the process started serving."""

    def __init__(self) -> None:
        self._started_at = datetime.now(timezone.utc)
        self._started_monotonic = monotonic()

    @property
    def started_at(self) -> datetime:
        return self._started_at

    def uptime_seconds(self) -> float:
        return max(0.0, monotonic() - self._started_monotonic)
