"""Host CPU and memory readings backed by psutil."""

from __future__ import annotations

import time
from typing import Optional, Tuple

import psutil

from healthboard.domain.entities.errors import MetricUnavailable
from healthboard.domain.entities.metrics import SystemResources, SystemUsage
from healthboard.domain.ports.metric_sources import ISystemMetricsSource

_MB = 1024 * 1024


class PsutilSystemMetrics(ISystemMetricsSource):
    """Reads utilisation of the whole host.

    ``read`` blocks for ``cpu_interval`` seconds because psutil needs two
    CPU time snapshots to compute a percentage; callers run it in a thread.
    """

    def __init__(self, cpu_interval: float = 0.2, disk_path: str = "/") -> None:
        self._cpu_interval = cpu_interval
        self._disk_path = disk_path

    def read(self) -> SystemUsage:
        try:
            cpu_pct = psutil.cpu_percent(interval=self._cpu_interval)
            memory = psutil.virtual_memory()
        except (psutil.Error, OSError) as exc:
            raise MetricUnavailable("system", str(exc)) from exc

        resources = SystemResources(
            cpu_count=psutil.cpu_count() or 1,
            memory_used_mb=int(memory.used // _MB),
            memory_total_mb=int(memory.total // _MB),
            disk_usage_percent=self._disk_usage(),
            load_average=self._load_average(),
            host_uptime_seconds=self._host_uptime(),
        )
        return SystemUsage(cpu_pct=cpu_pct, mem_pct=memory.percent, resources=resources)

    def _disk_usage(self) -> Optional[float]:
        try:
            return psutil.disk_usage(self._disk_path).percent
        except OSError:
            return None

    @staticmethod
    def _load_average() -> Optional[Tuple[float, float, float]]:
        try:
            one, five, fifteen = psutil.getloadavg()
        except (AttributeError, OSError):
            return None
        return (one, five, fifteen)

    @staticmethod
    def _host_uptime() -> Optional[float]:
        try:
            return max(0.0, time.time() - psutil.boot_time())
        except (psutil.Error, OSError):
            return None
