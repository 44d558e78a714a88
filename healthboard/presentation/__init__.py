"""
Presentation Layer Package

HTTP routers, the request timing middleware and the status page views.
"""

from healthboard.presentation import controllers, views

__all__ = ["controllers", "views"]
