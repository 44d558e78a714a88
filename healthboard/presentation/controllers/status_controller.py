"""HTML status page."""

from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends
from fastapi.responses import HTMLResponse

from healthboard.application.models import SystemInfo
from healthboard.application.use_cases.health_use_cases import GetStatusPageUseCase
from healthboard.presentation.views.status_page import (
    render_status_page,
    render_unavailable_page,
)
from healthboard.shared import get_logger

logger = get_logger(__name__)

router = APIRouter(tags=["Status"])


@router.get("/status", response_class=HTMLResponse)
@inject
async def status_page(
    get_status_page_use_case: GetStatusPageUseCase = Depends(
        Provide["get_status_page_use_case"]
    ),
    system_info: SystemInfo = Depends(Provide["system_info"]),
) -> HTMLResponse:
    """Dashboard with the health score and the history timeline."""
    try:
        view = await get_status_page_use_case.execute()
    except Exception as exc:
        logger.error("status.page.failure", error=str(exc), exc_info=exc)
        return HTMLResponse(render_unavailable_page(system_info.title, system_info.version))
    return HTMLResponse(render_status_page(view))
