"""
Infrastructure Layer Package

Implementations of the domain ports: psutil, MongoDB and HTTP probes,
the in-memory history store and the diagnostics orchestrator.
"""

from healthboard.infrastructure import repositories, services

__all__ = ["repositories", "services"]
