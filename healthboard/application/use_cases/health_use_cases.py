"""Use cases for the diagnostics endpoints."""

from typing import List

from healthboard.application.dtos.health_dto import HealthReportDTO, LightHealthDTO
from healthboard.application.dtos.info_dto import ApplicationInfoDTO
from healthboard.application.models import SystemInfo
from healthboard.domain.entities.dashboard import StatusPageView
from healthboard.domain.entities.health import ApplicationInfo, EndpointInfo
from healthboard.domain.ports.diagnostics import IDiagnosticsService
from healthboard.domain.ports.metric_sources import IUptimeSource
from healthboard.shared import HELP_ROUTE_PREFIX

HELP_ENDPOINTS: List[EndpointInfo] = [
    EndpointInfo(
        path=f"{HELP_ROUTE_PREFIX}/health",
        method="GET",
        description="Full health diagnostics: score, channel status and history",
    ),
    EndpointInfo(
        path=f"{HELP_ROUTE_PREFIX}/health-light",
        method="GET",
        description="Quick check (database and performance only)",
    ),
    EndpointInfo(
        path=f"{HELP_ROUTE_PREFIX}/info",
        method="GET",
        description="Information about the API",
    ),
    EndpointInfo(
        path=f"{HELP_ROUTE_PREFIX}/ping",
        method="GET",
        description="Simple connectivity check",
    ),
    EndpointInfo(
        path="/status",
        method="GET",
        description="HTML status page with the history timeline",
    ),
]


class GetHealthReportUseCase:
    """Use case responsible for the deep health check."""

    def __init__(self, diagnostics_service: IDiagnosticsService, version: str) -> None:
        self._diagnostics_service = diagnostics_service
        self._version = version

    @property
    def version(self) -> str:
        return self._version

    async def execute(self) -> HealthReportDTO:
        report = await self._diagnostics_service.health_report()
        return HealthReportDTO.from_domain(report, version=self._version)


class GetLightHealthUseCase:
    """Use case responsible for the shallow health check."""

    def __init__(self, diagnostics_service: IDiagnosticsService) -> None:
        self._diagnostics_service = diagnostics_service

    async def execute(self) -> LightHealthDTO:
        report = await self._diagnostics_service.light_report()
        return LightHealthDTO.from_domain(report)


class GetStatusPageUseCase:
    """Use case building the status page view model."""

    def __init__(self, diagnostics_service: IDiagnosticsService) -> None:
        self._diagnostics_service = diagnostics_service

    async def execute(self) -> StatusPageView:
        return await self._diagnostics_service.status_page()


class GetApplicationInfoUseCase:
    """Use case returning static metadata; never samples metrics."""

    def __init__(self, system_info: SystemInfo, uptime: IUptimeSource) -> None:
        self._info = system_info
        self._uptime = uptime

    def execute(self) -> ApplicationInfoDTO:
        info = ApplicationInfo(
            name=self._info.title,
            description=self._info.description,
            version=self._info.version,
            environment=self._info.environment,
            git_commit=self._info.git_commit,
            build_time=self._info.build_time,
            started_at=self._uptime.started_at,
            uptime_seconds=self._uptime.uptime_seconds(),
            authors=list(self._info.authors),
            endpoints=list(HELP_ENDPOINTS),
        )
        return ApplicationInfoDTO.from_domain(info)
