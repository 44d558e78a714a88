from __future__ import annotations

from datetime import datetime, timezone

import pytest

from healthboard.application.models import SystemInfo
from healthboard.application.use_cases.health_use_cases import GetStatusPageUseCase
from healthboard.domain.entities.dashboard import StatusPageView
from healthboard.domain.entities.metrics import HealthScore
from healthboard.presentation.controllers.status_controller import status_page

_SYSTEM_INFO = SystemInfo(
    title="healthboard", description="desc", version="1.0", environment="dev"
)


class _Diagnostics:
    def __init__(self, error: Exception | None = None) -> None:
        self.error = error

    async def status_page(self) -> StatusPageView:
        if self.error is not None:
            raise self.error
        return StatusPageView(
            api_name="healthboard",
            version="1.0",
            generated_at=datetime.now(timezone.utc),
            score=HealthScore.zero(),
            rows=[],
            perf_ms=None,
            uptime_text="0m",
            load_average="n/a",
            history_capacity=60,
        )


@pytest.mark.asyncio
async def test_status_page_renders_html():
    response = await status_page(
        get_status_page_use_case=GetStatusPageUseCase(_Diagnostics()),
        system_info=_SYSTEM_INFO,
    )
    assert response.status_code == 200
    assert b"<strong>0</strong>/100" in response.body


@pytest.mark.asyncio
async def test_status_page_falls_back_when_diagnostics_fail():
    response = await status_page(
        get_status_page_use_case=GetStatusPageUseCase(_Diagnostics(RuntimeError("x"))),
        system_info=_SYSTEM_INFO,
    )
    assert response.status_code == 200
    assert b"temporarily" in response.body
