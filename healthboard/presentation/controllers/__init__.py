"""
Controllers Package - Presentation Layer

FastAPI routers for the diagnostics endpoints and the status page.
"""

from .help_controller import router as help_router
from .status_controller import router as status_router

__all__ = ["help_router", "status_router"]
