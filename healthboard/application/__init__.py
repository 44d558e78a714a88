"""
Application Layer Package

Use cases and DTOs that turn diagnostics results into response
payloads for the presentation layer.
"""

from healthboard.application import dtos, models, use_cases

__all__ = ["dtos", "models", "use_cases"]
