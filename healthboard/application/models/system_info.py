"""Lightweight settings structures consumed by the application layer."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Tuple


@dataclass(frozen=True)
class SystemInfo:
    """Subset of configuration required by the info use case."""

    title: str
    description: str
    version: str
    environment: str
    git_commit: str = "unknown"
    build_time: str = "unknown"
    authors: Tuple[str, ...] = field(default_factory=tuple)
