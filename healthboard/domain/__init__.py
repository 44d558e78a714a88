"""
Domain Layer Package

Core diagnostics rules: severity classification, score aggregation and
the history window contract. Nothing here depends on frameworks or I/O.
"""

from healthboard.domain import entities, ports, repositories, services

__all__ = ["entities", "ports", "repositories", "services"]
