"""
DTOs Package - Application Layer

Pydantic models exchanged between the use cases and the HTTP layer.
"""

from .health_dto import (
    ChannelStatusDTO,
    HealthReportDTO,
    HealthScoreDTO,
    LightHealthDTO,
    MetricSampleDTO,
    PingDTO,
    SystemResourcesDTO,
)
from .info_dto import ApplicationInfoDTO, EndpointInfoDTO

__all__ = [
    "ApplicationInfoDTO",
    "ChannelStatusDTO",
    "EndpointInfoDTO",
    "HealthReportDTO",
    "HealthScoreDTO",
    "LightHealthDTO",
    "MetricSampleDTO",
    "PingDTO",
    "SystemResourcesDTO",
]
