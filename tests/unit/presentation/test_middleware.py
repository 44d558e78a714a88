from __future__ import annotations

from fastapi import FastAPI
from fastapi.testclient import TestClient

from healthboard.infrastructure.services.runtime_clock import RequestLatencyTracker
from healthboard.presentation.middleware import install_request_timing


def test_request_durations_are_recorded() -> None:
    app = FastAPI()
    tracker = RequestLatencyTracker(window=5)
    install_request_timing(app, tracker)

    @app.get("/echo")
    async def echo() -> dict:
        return {"ok": True}

    with TestClient(app) as client:
        assert client.get("/echo").status_code == 200
        client.get("/missing")

    average = tracker.average_ms()
    assert average is not None and average >= 0.0
