"""
Status page view model.

Typed data handed to the HTML renderer. The renderer only formats these
fields; every value is computed before it reaches the template.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional

from healthboard.domain.entities.metrics import HealthScore
from healthboard.domain.entities.severity import Channel, SeverityBucket


@dataclass(frozen=True, slots=True)
class TickView:
    """One history entry drawn as a coloured tick."""

    severity: SeverityBucket
    tooltip: str


@dataclass(frozen=True, slots=True)
class ChannelRowView:
    """A channel's current severity and its history ticks, oldest first."""

    channel: Channel
    title: str
    current: SeverityBucket
    ticks: List[TickView] = field(default_factory=list)


@dataclass(frozen=True, slots=True)
class StatusPageView:
    """Everything the status page shows."""

    api_name: str
    version: str
    generated_at: datetime
    score: HealthScore
    rows: List[ChannelRowView]
    perf_ms: Optional[float]
    uptime_text: str
    load_average: str
    history_capacity: int
