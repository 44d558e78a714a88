"""Use cases package."""

from .health_use_cases import (
    HELP_ENDPOINTS,
    GetApplicationInfoUseCase,
    GetHealthReportUseCase,
    GetLightHealthUseCase,
    GetStatusPageUseCase,
)

__all__ = [
    "HELP_ENDPOINTS",
    "GetApplicationInfoUseCase",
    "GetHealthReportUseCase",
    "GetLightHealthUseCase",
    "GetStatusPageUseCase",
]
