"""Infrastructure services package."""

from .diagnostics_service import DiagnosticsService
from .metric_sampler import MetricSampler
from .probes import HttpNetworkProbe, MongoDatabaseProbe
from .runtime_clock import RequestLatencyTracker, UptimeClock
from .system_metrics import PsutilSystemMetrics

__all__ = [
    "DiagnosticsService",
    "HttpNetworkProbe",
    "MetricSampler",
    "MongoDatabaseProbe",
    "PsutilSystemMetrics",
    "RequestLatencyTracker",
    "UptimeClock",
]
