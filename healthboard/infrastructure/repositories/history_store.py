"""
In-memory history store - Infrastructure Layer

One bounded deque per tracked channel. Each window has its own lock, held
only while appending or copying, so a reader never sees a half-updated
window and never waits on a metric read.
"""

from __future__ import annotations

import threading
from collections import deque
from typing import Deque, Dict, Iterable, Tuple

from healthboard.domain.entities.errors import (
    HistoryCorruption,
    HistoryInitializationError,
)
from healthboard.domain.entities.metrics import MetricSample
from healthboard.domain.entities.severity import TRACKED_CHANNELS, Channel
from healthboard.domain.repositories.history_repository import (
    IHistoryRepository,
    WindowState,
)
from healthboard.shared import DEFAULT_HISTORY_CAPACITY, get_logger

logger = get_logger(__name__)


class _Window:
    __slots__ = ("samples", "lock")

    def __init__(self, capacity: int) -> None:
        self.samples: Deque[MetricSample] = deque(maxlen=capacity)
        self.lock = threading.Lock()


class HistoryStore(IHistoryRepository):
    """Fixed-capacity FIFO history for each tracked channel."""

    def __init__(
        self,
        capacity: int = DEFAULT_HISTORY_CAPACITY,
        channels: Iterable[Channel] = TRACKED_CHANNELS,
        *,
        strict: bool = False,
    ) -> None:
        """
        Create the store.

        Args:
            capacity: Samples kept per channel, fixed for the store lifetime
            channels: Channels that get a window
            strict: Raise on invariant violations instead of resetting the
                affected window

        Raises:
            HistoryInitializationError: If the capacity or channels are invalid
        """
        if isinstance(capacity, bool) or not isinstance(capacity, int) or capacity <= 0:
            raise HistoryInitializationError(
                f"History capacity must be a positive integer, got {capacity!r}"
            )
        windows = {Channel(channel): _Window(capacity) for channel in channels}
        if not windows:
            raise HistoryInitializationError("History store needs at least one channel")

        self._capacity = capacity
        self._strict = strict
        self._windows: Dict[Channel, _Window] = windows

    def capacity(self) -> int:
        return self._capacity

    def append(self, channel: Channel, sample: MetricSample) -> None:
        window = self._window(channel)
        channel = Channel(channel)
        with window.lock:
            reason = self._violation(channel, sample, window.samples)
            if reason is not None:
                if self._strict:
                    raise HistoryCorruption(channel.value, reason)
                logger.error(
                    "history.corruption.reset",
                    channel=channel.value,
                    reason=reason,
                    dropped=len(window.samples),
                )
                window.samples.clear()
            # deque(maxlen=...) drops the oldest sample when full.
            window.samples.append(sample)

    def snapshot(self, channel: Channel) -> Tuple[MetricSample, ...]:
        window = self._window(channel)
        with window.lock:
            return tuple(window.samples)

    def window_state(self, channel: Channel) -> WindowState:
        window = self._window(channel)
        with window.lock:
            size = len(window.samples)
        if size == 0:
            return WindowState.EMPTY
        if size < self._capacity:
            return WindowState.PARTIAL
        return WindowState.FULL

    def clear(self) -> None:
        for window in self._windows.values():
            with window.lock:
                window.samples.clear()

    def _window(self, channel: Channel) -> _Window:
        try:
            return self._windows[Channel(channel)]
        except (KeyError, ValueError):
            raise ValueError(f"Channel '{channel}' is not tracked") from None

    @staticmethod
    def _violation(
        channel: Channel, sample: MetricSample, samples: Deque[MetricSample]
    ) -> str | None:
        if sample.channel != channel:
            return f"sample for '{sample.channel.value}' appended to '{channel.value}'"
        if samples and sample.timestamp < samples[-1].timestamp:
            return (
                f"timestamp {sample.timestamp.isoformat()} is older than "
                f"{samples[-1].timestamp.isoformat()}"
            )
        return None
