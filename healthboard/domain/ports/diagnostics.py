"""Domain service abstraction for the diagnostics orchestrator."""

from __future__ import annotations

from typing import Protocol

from healthboard.domain.entities.dashboard import StatusPageView
from healthboard.domain.entities.metrics import HealthReport, LightHealthReport


class IDiagnosticsService(Protocol):
    """Interface consumed by the health use cases."""

    async def health_report(self) -> HealthReport:
        """Fresh reading, score, per-channel status and history."""
        ...

    async def light_report(self) -> LightHealthReport:
        """Database and performance check only."""
        ...

    async def status_page(self) -> StatusPageView:
        """View model for the HTML status page."""
        ...
