"""
Dependency container injection module - Main Layer

This module implements the dependency injection container
to simplify the management and lifecycle of dependencies
in the application.
"""

from contextlib import asynccontextmanager
from typing import Any, Dict, Mapping, Optional

from dependency_injector import containers, providers
from pymongo.errors import PyMongoError

from healthboard.application.models import SystemInfo
from healthboard.application.use_cases.health_use_cases import (
    GetApplicationInfoUseCase,
    GetHealthReportUseCase,
    GetLightHealthUseCase,
    GetStatusPageUseCase,
)
from healthboard.domain.entities.severity import Channel, MetricKey, Resource
from healthboard.domain.services import ScoreAggregator, SeverityClassifier
from healthboard.domain.services.severity_classifier import ThresholdTable
from healthboard.infrastructure.database import MongoDatabase
from healthboard.infrastructure.repositories.history_store import HistoryStore
from healthboard.infrastructure.services.diagnostics_service import DiagnosticsService
from healthboard.infrastructure.services.metric_sampler import MetricSampler
from healthboard.infrastructure.services.probes import (
    HttpNetworkProbe,
    MongoDatabaseProbe,
)
from healthboard.infrastructure.services.runtime_clock import (
    RequestLatencyTracker,
    UptimeClock,
)
from healthboard.infrastructure.services.system_metrics import PsutilSystemMetrics
from healthboard.shared import HELP_ROUTE_PREFIX, EnumEnvironment, get_logger

from .config import AppSettings

logger = get_logger(__name__)

_THRESHOLD_FIELDS: Dict[MetricKey, tuple] = {
    Channel.API: ("api_thresholds", "ms"),
    Channel.DATABASE: ("database_thresholds", "ms"),
    Channel.NETWORK: ("network_thresholds", "ms"),
    Resource.CPU: ("cpu_thresholds", "%"),
    Resource.MEMORY: ("memory_thresholds", "%"),
}


def _environment_name(env: Any) -> str:
    return env.value if hasattr(env, "value") else str(env)


def build_threshold_tables(diagnostics: Mapping[str, Any]) -> Dict[MetricKey, ThresholdTable]:
    """Turn the configured threshold lists into classifier tables."""
    tables: Dict[MetricKey, ThresholdTable] = {}
    for key, (field_name, unit) in _THRESHOLD_FIELDS.items():
        bounds = diagnostics.get(field_name)
        if bounds:
            tables[key] = ThresholdTable.of(bounds, unit=unit)
    return tables


def resolve_self_ping_url(configured: Optional[str], host: str, port: int) -> str:
    """Network probe target: the configured URL or this server's own ping."""
    if configured:
        return configured
    if host in ("0.0.0.0", "::", ""):
        host = "127.0.0.1"
    return f"http://{host}:{port}{HELP_ROUTE_PREFIX}/ping"


def resolve_strict_history(strict: Optional[bool], environment: Any) -> bool:
    """Explicit setting wins; otherwise strict everywhere but production."""
    if strict is not None:
        return bool(strict)
    return _environment_name(environment) != EnumEnvironment.PRODUCTION.value


class AppContainer(containers.DeclarativeContainer):
    """Composition Root using dependecy-injector."""

    wiring_config = containers.WiringConfiguration(
        packages=["..presentation", "..application"]
    )

    # Settings
    config = providers.Configuration()

    # Infrastructure
    mongo_database = providers.Singleton(
        MongoDatabase,
        mongo_uri=config.database.mongo_uri,
        db_name=config.database.database_name,
        server_selection_timeout_ms=config.database.server_selection_timeout_ms,
    )

    history_store = providers.Singleton(
        HistoryStore,
        capacity=config.diagnostics.history_capacity,
        strict=providers.Callable(
            resolve_strict_history,
            config.diagnostics.strict_history,
            config.environment,
        ),
    )

    latency_tracker = providers.Singleton(
        RequestLatencyTracker,
        window=config.diagnostics.latency_window,
    )

    uptime_clock = providers.Singleton(UptimeClock)

    system_metrics = providers.Singleton(
        PsutilSystemMetrics,
        cpu_interval=config.diagnostics.cpu_sample_interval_seconds,
    )

    database_probe = providers.Singleton(
        MongoDatabaseProbe,
        mongo_database=mongo_database,
    )

    network_probe = providers.Singleton(
        HttpNetworkProbe,
        url=providers.Callable(
            resolve_self_ping_url,
            config.diagnostics.self_ping_url,
            config.server.host,
            config.server.port,
        ),
        http_timeout=config.diagnostics.read_timeout_seconds,
    )

    metric_sampler = providers.Singleton(
        MetricSampler,
        system_metrics=system_metrics,
        database_probe=database_probe,
        network_probe=network_probe,
        latency_source=latency_tracker,
        read_timeout=config.diagnostics.read_timeout_seconds,
    )

    # Domain services
    severity_classifier = providers.Singleton(
        SeverityClassifier,
        thresholds=providers.Callable(build_threshold_tables, config.diagnostics),
    )

    score_aggregator = providers.Singleton(
        ScoreAggregator,
        perf_ceiling_ms=config.diagnostics.perf_ceiling_ms,
        db_latency_budget_ms=config.diagnostics.db_latency_budget_ms,
    )

    diagnostics_service = providers.Singleton(
        DiagnosticsService,
        sampler=metric_sampler,
        classifier=severity_classifier,
        aggregator=score_aggregator,
        history_store=history_store,
        uptime=uptime_clock,
        app_name=config.app.title,
        version=config.app.version,
        interval_seconds=config.diagnostics.sample_interval_seconds,
        initial_delay_seconds=config.diagnostics.initial_delay_seconds,
    )

    system_info = providers.Singleton(
        SystemInfo,
        title=config.app.title,
        description=config.app.description,
        version=config.app.version,
        environment=providers.Callable(_environment_name, config.environment),
        git_commit=config.app.git_commit,
        build_time=config.app.build_time,
        authors=providers.Callable(
            lambda authors: tuple(authors or ()), config.app.authors
        ),
    )

    # Application (use cases)
    get_health_report_use_case = providers.Factory(
        GetHealthReportUseCase,
        diagnostics_service=diagnostics_service,
        version=config.app.version,
    )

    get_light_health_use_case = providers.Factory(
        GetLightHealthUseCase,
        diagnostics_service=diagnostics_service,
    )

    get_status_page_use_case = providers.Factory(
        GetStatusPageUseCase,
        diagnostics_service=diagnostics_service,
    )

    get_application_info_use_case = providers.Factory(
        GetApplicationInfoUseCase,
        system_info=system_info,
        uptime=uptime_clock,
    )


# -------------------------
# Global Container Instance
# -------------------------
_app_container: AppContainer | None = None


def init_container(settings: AppSettings) -> AppContainer:
    """Initialize global container with application settings."""

    global _app_container

    container = AppContainer()
    container.config.from_pydantic(settings)
    _app_container = container
    return container


def get_container() -> AppContainer:
    """Get the initialized global container."""

    if _app_container is None:
        raise RuntimeError("Container has not been initialized yet")

    return _app_container


@asynccontextmanager
async def app_lifespan():
    """
    Centralized lifecycle management for the diagnostics resources.

    The history store is built first: a bad capacity aborts startup.
    The background sampler is started once and stopped on shutdown,
    after which the Mongo client is closed.
    """
    container = get_container()

    history_store = container.history_store()
    logger.info("container.history.ready", capacity=history_store.capacity())

    diagnostics_service = container.diagnostics_service()
    mongo_database = container.mongo_database()

    try:
        await diagnostics_service.start()
        logger.info("container.resources.initialized")
        yield container

    finally:
        await diagnostics_service.stop()

        logger.info("container.mongo.close")
        try:
            mongo_database.close()
        except PyMongoError as exc:
            logger.warning("container.mongo.close_failed", error=str(exc))

        logger.info("container.resources.shutdown")
