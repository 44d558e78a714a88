"""Human-readable problem lists attached to history samples."""

from typing import Dict, List

from healthboard.domain.entities.metrics import MetricReading
from healthboard.domain.entities.severity import (
    TRACKED_CHANNELS,
    Channel,
    Resource,
    SeverityBucket,
)
from healthboard.domain.services.severity_classifier import SeverityClassifier

DISK_NEARLY_FULL_PCT = 85.0
DISK_FULL_PCT = 95.0

# Unavailable signals not listed here are host or performance signals.
_SIGNAL_CHANNELS: Dict[str, Channel] = {
    "database": Channel.DATABASE,
    "network": Channel.NETWORK,
}


def detect_issues(
    reading: MetricReading, classifier: SeverityClassifier
) -> Dict[Channel, List[str]]:
    """
    List the problems visible in a reading, per tracked channel.

    Slow and overloaded levels come from the classifier thresholds. Host
    resources are reported on the API channel. Lists are empty when healthy.
    """

    issues: Dict[Channel, List[str]] = {channel: [] for channel in TRACKED_CHANNELS}

    database = issues[Channel.DATABASE]
    if not reading.db_ok:
        database.append("Database disconnected")
    elif (
        reading.db_latency_ms is not None
        and classifier.classify(Channel.DATABASE, reading.db_latency_ms)
        is SeverityBucket.OVERLOAD
    ):
        database.append(f"Database slow: {reading.db_latency_ms:.0f} ms")

    network = issues[Channel.NETWORK]
    if not reading.network_ok:
        network.append("Network unreachable")
    elif (
        reading.network_latency_ms is not None
        and classifier.classify(Channel.NETWORK, reading.network_latency_ms)
        is SeverityBucket.OVERLOAD
    ):
        network.append(f"Network slow: {reading.network_latency_ms:.0f} ms")

    api = issues[Channel.API]
    perf = reading.perf_ms
    if perf is not None:
        severity = classifier.classify(Channel.API, perf)
        if severity is SeverityBucket.OVERLOAD:
            api.append(f"API very slow: {perf:.0f} ms")
        elif severity is SeverityBucket.CRITICAL:
            api.append(f"API slow: {perf:.0f} ms")

    cpu = reading.cpu_pct
    if cpu is not None:
        severity = classifier.classify(Resource.CPU, cpu)
        if severity is SeverityBucket.OVERLOAD:
            api.append(f"CPU overloaded: {cpu:.1f}%")
        elif severity is SeverityBucket.CRITICAL:
            api.append(f"CPU high: {cpu:.1f}%")

    mem = reading.mem_pct
    if mem is not None:
        severity = classifier.classify(Resource.MEMORY, mem)
        if severity is SeverityBucket.OVERLOAD:
            api.append(f"Memory critical: {mem:.1f}%")
        elif severity is SeverityBucket.CRITICAL:
            api.append(f"Memory high: {mem:.1f}%")

    disk = reading.resources.disk_usage_percent if reading.resources else None
    if disk is not None:
        if disk > DISK_FULL_PCT:
            api.append(f"Disk full: {disk:.1f}%")
        elif disk > DISK_NEARLY_FULL_PCT:
            api.append(f"Disk nearly full: {disk:.1f}%")

    for signal in sorted(reading.unavailable):
        channel = _SIGNAL_CHANNELS.get(signal, Channel.API)
        issues[channel].append(f"{signal} unavailable: {reading.unavailable[signal]}")

    return issues
