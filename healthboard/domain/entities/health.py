"""
Application info entities.

Static metadata surfaced by the /help/info endpoint.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import List


@dataclass(slots=True)
class EndpointInfo:
    """Describes one diagnostics endpoint."""

    path: str
    method: str
    description: str


@dataclass(slots=True)
class ApplicationInfo:
    """Operational metadata for the running service."""

    name: str
    description: str
    version: str
    environment: str
    git_commit: str
    build_time: str
    started_at: datetime
    uptime_seconds: float
    authors: List[str] = field(default_factory=list)
    endpoints: List[EndpointInfo] = field(default_factory=list)
