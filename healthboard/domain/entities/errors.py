"""
Domain Errors

Exceptions raised by the diagnostics subsystem.
"""

from typing import Any, Dict, Optional


class DiagnosticsError(Exception):
    """Base class for diagnostics errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)


class MetricUnavailable(DiagnosticsError):
    """A signal could not be read. Non-fatal: scored as the worst case."""

    def __init__(
        self, signal: str, reason: str, details: Optional[Dict[str, Any]] = None
    ):
        self.signal = signal
        self.reason = reason
        super().__init__(f"Metric '{signal}' unavailable: {reason}", details)


class SamplingTimeout(MetricUnavailable):
    """A signal read did not complete within its timeout."""

    def __init__(self, signal: str, timeout_seconds: float):
        self.timeout_seconds = timeout_seconds
        super().__init__(
            signal,
            f"timed out after {timeout_seconds:g}s",
            {"timeout_seconds": timeout_seconds},
        )


class HistoryCorruption(DiagnosticsError):
    """A history window invariant was violated (a programming error)."""

    def __init__(self, channel: str, reason: str):
        self.channel = channel
        super().__init__(
            f"History window '{channel}' corrupted: {reason}", {"channel": channel}
        )


class HistoryInitializationError(DiagnosticsError):
    """The history store could not be created. Fatal at startup."""
