"""
History Repository Interface

Defines the bounded per-channel history used by the status timeline.
Implementations must keep at most ``capacity()`` samples per channel and
evict the oldest sample first.
"""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Tuple

from healthboard.domain.entities.metrics import MetricSample
from healthboard.domain.entities.severity import Channel


class WindowState(str, Enum):
    """Fill level of one channel window."""

    EMPTY = "empty"
    PARTIAL = "partial"
    FULL = "full"


class IHistoryRepository(ABC):
    """Interface for history store implementations."""

    @abstractmethod
    def capacity(self) -> int:
        """Maximum number of samples kept per channel."""
        pass

    @abstractmethod
    def append(self, channel: Channel, sample: MetricSample) -> None:
        """
        Append a sample, evicting the oldest one when the window is full.

        Args:
            channel: The channel window to append to
            sample: The classified sample; its channel must match

        Raises:
            HistoryCorruption: If the append would break the window
                invariants and the store does not self-heal
        """
        pass

    @abstractmethod
    def snapshot(self, channel: Channel) -> Tuple[MetricSample, ...]:
        """
        Read a channel window.

        Args:
            channel: The channel to read

        Returns:
            The samples, oldest first
        """
        pass

    @abstractmethod
    def window_state(self, channel: Channel) -> WindowState:
        """Whether the channel window is empty, partially filled or full."""
        pass

    @abstractmethod
    def clear(self) -> None:
        """Drop every sample of every channel."""
        pass
