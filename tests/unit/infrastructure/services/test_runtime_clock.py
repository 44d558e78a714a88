from __future__ import annotations

from datetime import timezone

import pytest

from healthboard.infrastructure.services.runtime_clock import (
    RequestLatencyTracker,
    UptimeClock,
)


def test_tracker_averages_the_last_requests() -> None:
    tracker = RequestLatencyTracker(window=5)
    assert tracker.average_ms() is None

    for duration in (100.0, 10.0, 20.0, 30.0, 40.0, 50.0):
        tracker.record(duration)

    assert tracker.average_ms() == pytest.approx(30.0)


def test_tracker_ignores_negative_durations() -> None:
    tracker = RequestLatencyTracker(window=2)
    tracker.record(-5.0)
    assert tracker.average_ms() == 0.0


def test_tracker_window_must_be_positive() -> None:
    with pytest.raises(ValueError):
        RequestLatencyTracker(window=0)


def test_uptime_clock() -> None:
    clock = UptimeClock()
    assert clock.started_at.tzinfo == timezone.utc
    assert clock.uptime_seconds() >= 0.0
