"""
Help endpoints exposing health diagnostics and service metadata.

The health endpoints always answer 200: a failure while building the
report degrades the body instead of the status code, so liveness probes
keep working.
"""

from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends

from healthboard.application.dtos.health_dto import (
    HealthReportDTO,
    LightHealthDTO,
    PingDTO,
)
from healthboard.application.dtos.info_dto import ApplicationInfoDTO
from healthboard.application.use_cases.health_use_cases import (
    GetApplicationInfoUseCase,
    GetHealthReportUseCase,
    GetLightHealthUseCase,
)
from healthboard.shared import HELP_ROUTE_PREFIX, get_logger

logger = get_logger(__name__)

router = APIRouter(prefix=HELP_ROUTE_PREFIX, tags=["Help"])


@router.get("/health", response_model=HealthReportDTO)
@inject
async def health(
    get_health_report_use_case: GetHealthReportUseCase = Depends(
        Provide["get_health_report_use_case"]
    ),
) -> HealthReportDTO:
    """Full diagnostics: score, per-channel status and history."""
    try:
        report = await get_health_report_use_case.execute()
        logger.debug("health.check.success", total=report.score.total)
        return report
    except Exception as exc:
        logger.error("health.check.failure", error=str(exc), exc_info=exc)
        return HealthReportDTO.degraded(
            version=get_health_report_use_case.version, reason=str(exc)
        )


@router.get("/health-light", response_model=LightHealthDTO)
@inject
async def health_light(
    get_light_health_use_case: GetLightHealthUseCase = Depends(
        Provide["get_light_health_use_case"]
    ),
) -> LightHealthDTO:
    """Quick check of the database and request performance."""
    try:
        return await get_light_health_use_case.execute()
    except Exception as exc:
        logger.error("health.light.failure", error=str(exc), exc_info=exc)
        return LightHealthDTO.degraded()


@router.get("/info", response_model=ApplicationInfoDTO)
@inject
async def info(
    get_application_info_use_case: GetApplicationInfoUseCase = Depends(
        Provide["get_application_info_use_case"]
    ),
) -> ApplicationInfoDTO:
    """Static metadata about the service."""
    return get_application_info_use_case.execute()


@router.get("/ping", response_model=PingDTO)
async def ping() -> PingDTO:
    """Connectivity check; evaluates no metrics."""
    return PingDTO(ok=True)
