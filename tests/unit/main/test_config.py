from __future__ import annotations

import pytest
from pydantic import ValidationError

from healthboard.main.config import AppSettings, DiagnosticsSettings, get_settings
from healthboard.shared.consts import EnumEnvironment


def test_get_settings_loads_defaults(monkeypatch) -> None:
    monkeypatch.delenv("DB_MONGO_URI", raising=False)
    monkeypatch.delenv("ENVIRONMENT", raising=False)

    settings = get_settings()

    assert settings.database.mongo_uri.startswith("mongodb://")
    assert settings.environment == EnumEnvironment.DEVELOPMENT
    assert settings.server.port == 3000
    assert settings.diagnostics.history_capacity == 60
    assert settings.diagnostics.sample_interval_seconds == 300
    assert settings.diagnostics.read_timeout_seconds == 2.0
    assert settings.diagnostics.api_thresholds == [100, 300, 500, 1000]


def test_settings_respect_environment_variables(monkeypatch) -> None:
    monkeypatch.setenv("DB_MONGO_URI", "mongodb://test")
    monkeypatch.setenv("APP_TITLE", "Testing")
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("DIAGNOSTICS_HISTORY_CAPACITY", "10")
    monkeypatch.setenv("DIAGNOSTICS_DATABASE_THRESHOLDS", "[10, 20, 30, 40]")

    settings = AppSettings()

    assert settings.database.mongo_uri == "mongodb://test"
    assert settings.app.title == "Testing"
    assert settings.logging.level.value == "DEBUG"
    assert settings.diagnostics.history_capacity == 10
    assert settings.diagnostics.database_thresholds == [10, 20, 30, 40]


@pytest.mark.parametrize("thresholds", [[1, 2, 3], [40, 30, 20, 10]])
def test_invalid_thresholds_are_rejected(thresholds) -> None:
    with pytest.raises(ValidationError):
        DiagnosticsSettings(cpu_thresholds=thresholds)


def test_timeouts_must_be_positive() -> None:
    with pytest.raises(ValidationError):
        DiagnosticsSettings(read_timeout_seconds=0)
