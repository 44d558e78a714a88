from __future__ import annotations

import pytest
from dependency_injector import providers

from healthboard.main import app as module_app
from healthboard.main.app import create_app
from healthboard.main.container import get_container


class _StubMongoDatabase:
    def ping(self) -> dict:
        return {"ok": 1.0}

    def close(self) -> None:
        pass


@pytest.mark.asyncio
async def test_create_app_initializes_lifespan() -> None:
    app = create_app()
    get_container().mongo_database.override(providers.Object(_StubMongoDatabase()))
    assert app.title

    async with app.router.lifespan_context(app):
        assert app.state.container.diagnostics_service().running

    assert isinstance(module_app.app, type(app))


def test_create_app_registers_routes() -> None:
    app = create_app()
    paths = {route.path for route in app.routes}
    assert {
        "/help/health",
        "/help/health-light",
        "/help/info",
        "/help/ping",
        "/status",
    } <= paths
