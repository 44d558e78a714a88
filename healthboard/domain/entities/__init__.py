"""
Domain Entities Package

This package contains the value objects of the diagnostics subsystem.
"""

from .errors import (
    DiagnosticsError,
    HistoryCorruption,
    HistoryInitializationError,
    MetricUnavailable,
    SamplingTimeout,
)
from .health import ApplicationInfo, EndpointInfo
from .metrics import (
    SUB_SCORE_MAX,
    ChannelStatus,
    HealthReport,
    HealthScore,
    LightHealthReport,
    MetricReading,
    MetricSample,
    ProbeResult,
    SystemResources,
    SystemUsage,
)
from .severity import (
    TRACKED_CHANNELS,
    Channel,
    MetricKey,
    Resource,
    SeverityBucket,
)

__all__ = [
    "ApplicationInfo",
    "Channel",
    "ChannelStatus",
    "DiagnosticsError",
    "EndpointInfo",
    "HealthReport",
    "HealthScore",
    "HistoryCorruption",
    "HistoryInitializationError",
    "LightHealthReport",
    "MetricKey",
    "MetricReading",
    "MetricSample",
    "MetricUnavailable",
    "ProbeResult",
    "Resource",
    "SamplingTimeout",
    "SeverityBucket",
    "SUB_SCORE_MAX",
    "SystemResources",
    "SystemUsage",
    "TRACKED_CHANNELS",
]
