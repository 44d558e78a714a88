"""
Severity domain entities.

A single five-tier scale is shared by the history ticks and the overall
health status band, so both classifications always agree on what
"warning" or "critical" means.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Tuple, Union


class Channel(str, Enum):
    """History streams tracked by the diagnostics subsystem."""

    API = "api"
    DATABASE = "db"
    NETWORK = "network"


class Resource(str, Enum):
    """Host resources that are classified but never kept in history."""

    CPU = "cpu"
    MEMORY = "memory"


MetricKey = Union[Channel, Resource]

TRACKED_CHANNELS: Tuple[Channel, ...] = (Channel.API, Channel.DATABASE, Channel.NETWORK)


@dataclass(frozen=True)
class SeverityStyle:
    """Presentation tokens attached to a severity bucket."""

    label: str
    badge: str
    icon: str
    gradient: Tuple[str, str]


class SeverityBucket(str, Enum):
    """Five ordered health levels, from best to worst."""

    EXCELLENT = "excellent"
    GOOD = "good"
    WARNING = "warning"
    CRITICAL = "critical"
    OVERLOAD = "overload"

    @property
    def rank(self) -> int:
        """Badness rank, 0 for excellent and 4 for overload."""
        return _ORDER.index(self)

    @property
    def style(self) -> SeverityStyle:
        return _STYLES[self]

    @property
    def label(self) -> str:
        return self.style.label

    @property
    def color(self) -> str:
        return self.style.badge

    @property
    def icon(self) -> str:
        return self.style.icon

    @classmethod
    def worst(cls, *buckets: "SeverityBucket") -> "SeverityBucket":
        if not buckets:
            raise ValueError("worst() needs at least one bucket")
        return max(buckets, key=lambda bucket: bucket.rank)

    @classmethod
    def from_score(cls, total: int) -> "SeverityBucket":
        """Map a 0-100 health score onto the same five tiers."""
        for floor, bucket in SCORE_BANDS:
            if total >= floor:
                return bucket
        return cls.OVERLOAD


_ORDER: Tuple[SeverityBucket, ...] = (
    SeverityBucket.EXCELLENT,
    SeverityBucket.GOOD,
    SeverityBucket.WARNING,
    SeverityBucket.CRITICAL,
    SeverityBucket.OVERLOAD,
)

_STYLES: Dict[SeverityBucket, SeverityStyle] = {
    SeverityBucket.EXCELLENT: SeverityStyle(
        label="Excellent", badge="success", icon="shield-check",
        gradient=("#10b981", "#059669"),
    ),
    SeverityBucket.GOOD: SeverityStyle(
        label="Good", badge="info", icon="thumbs-up",
        gradient=("#3b82f6", "#2563eb"),
    ),
    SeverityBucket.WARNING: SeverityStyle(
        label="Warning", badge="warning", icon="alert-triangle",
        gradient=("#f59e0b", "#d97706"),
    ),
    SeverityBucket.CRITICAL: SeverityStyle(
        label="Critical", badge="error", icon="alert-circle",
        gradient=("#ef4444", "#dc2626"),
    ),
    SeverityBucket.OVERLOAD: SeverityStyle(
        label="Overload", badge="error", icon="x-circle",
        gradient=("#dc2626", "#991b1b"),
    ),
}

# Minimum total score for each tier, checked in order.
SCORE_BANDS: Tuple[Tuple[int, SeverityBucket], ...] = (
    (90, SeverityBucket.EXCELLENT),
    (70, SeverityBucket.GOOD),
    (50, SeverityBucket.WARNING),
    (25, SeverityBucket.CRITICAL),
)
