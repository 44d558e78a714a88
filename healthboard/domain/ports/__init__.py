"""Domain ports package."""

from .diagnostics import IDiagnosticsService
from .metric_sources import (
    IDatabaseProbe,
    ILatencySource,
    IMetricSampler,
    INetworkProbe,
    ISystemMetricsSource,
    IUptimeSource,
)

__all__ = [
    "IDatabaseProbe",
    "IDiagnosticsService",
    "ILatencySource",
    "IMetricSampler",
    "INetworkProbe",
    "ISystemMetricsSource",
    "IUptimeSource",
]
