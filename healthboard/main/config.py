"""
Application Settings - Main Layer

Use Pydantic Settings for configuration management.
Values come from environment variables, an optional .env file and the
defaults below.
"""

from typing import List, Optional

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from healthboard.shared import (
    DEFAULT_HISTORY_CAPACITY,
    DEFAULT_READ_TIMEOUT_SECONDS,
    DEFAULT_SAMPLE_INTERVAL_SECONDS,
    EnumEnvironment,
    EnumLogLevel,
)


class AppInfoSettings(BaseSettings):
    """Service identity reported by /help/info and the status page."""

    title: str = Field(default="healthboard", description="Service name")
    description: str = Field(
        default="REST service template with built-in health diagnostics",
        description="Service description",
    )
    version: str = Field(default="0.1.0", description="Service version")
    authors: List[str] = Field(
        default_factory=lambda: ["Healthboard maintainers"],
        description="Package authors",
    )
    git_commit: str = Field(
        default="unknown",
        description="Git commit hash",
        validation_alias=AliasChoices("APP_GIT_COMMIT", "GIT_COMMIT"),
    )
    build_time: str = Field(
        default="unknown",
        description="Build timestamp",
        validation_alias=AliasChoices("APP_BUILD_TIME", "BUILD_TIME"),
    )

    model_config = SettingsConfigDict(
        env_prefix="APP_", case_sensitive=False, extra="ignore"
    )


class ServerSettings(BaseSettings):
    """HTTP server binding."""

    host: str = Field(default="127.0.0.1", description="Interface to bind")
    port: int = Field(default=3000, description="Port to bind the server")
    reload: bool = Field(
        default=False, description="Enable auto-reload for development"
    )

    model_config = SettingsConfigDict(
        env_prefix="SERVER_", case_sensitive=False, extra="ignore"
    )


class DatabaseSettings(BaseSettings):
    """Database configuration settings."""

    mongo_uri: str = Field(
        default="mongodb://localhost:27017/healthboard",
        description="MongoDB connection URI",
        validation_alias=AliasChoices("DB_MONGO_URI", "DATABASE_URL"),
    )
    database_name: str = Field(
        default="healthboard", description="Name of the MongoDB database"
    )
    server_selection_timeout_ms: int = Field(
        default=2000, gt=0, description="pymongo server selection timeout"
    )

    model_config = SettingsConfigDict(
        env_prefix="DB_", case_sensitive=False, extra="ignore"
    )


class LoggingSettings(BaseSettings):
    """Logging configuration settings."""

    level: EnumLogLevel = Field(default=EnumLogLevel.INFO, description="Logging level")
    format: str = Field(
        default="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        description="Logging format",
    )
    file_path: Optional[str] = Field(
        default=None, description="Log file path (if None, logs to console)"
    )

    model_config = SettingsConfigDict(
        env_prefix="LOG_", case_sensitive=False, extra="ignore"
    )


class CorsSettings(BaseSettings):
    """Cross-origin policy."""

    allowed_origins: List[str] = Field(
        default_factory=lambda: ["http://localhost:3000", "http://127.0.0.1:3000"]
    )
    allowed_methods: List[str] = Field(
        default_factory=lambda: ["GET", "POST", "PUT", "DELETE", "OPTIONS"]
    )
    allowed_headers: List[str] = Field(
        default_factory=lambda: ["content-type", "authorization"]
    )

    model_config = SettingsConfigDict(
        env_prefix="CORS_", case_sensitive=False, extra="ignore"
    )


class DiagnosticsSettings(BaseSettings):
    """Sampling cadence, history size, timeouts and severity thresholds."""

    sample_interval_seconds: float = Field(
        default=DEFAULT_SAMPLE_INTERVAL_SECONDS,
        gt=0,
        description="Delay between two history samples",
    )
    initial_delay_seconds: float = Field(
        default=5.0, ge=0, description="Wait before the first history sample"
    )
    history_capacity: int = Field(
        default=DEFAULT_HISTORY_CAPACITY, description="Samples kept per channel"
    )
    read_timeout_seconds: float = Field(
        default=DEFAULT_READ_TIMEOUT_SECONDS,
        gt=0,
        description="Timeout applied to every metric read",
    )
    cpu_sample_interval_seconds: float = Field(
        default=0.2, gt=0, description="psutil CPU measurement window"
    )
    latency_window: int = Field(
        default=5, gt=0, description="Requests averaged for the performance signal"
    )
    perf_ceiling_ms: float = Field(
        default=1000.0, gt=0, description="Latency that scores 0 performance points"
    )
    db_latency_budget_ms: float = Field(
        default=100.0, gt=0, description="DB latency that still scores full network points"
    )
    self_ping_url: Optional[str] = Field(
        default=None,
        description="URL checked by the network probe; defaults to this server's ping",
    )
    strict_history: Optional[bool] = Field(
        default=None,
        description="Raise on history corruption; defaults to on outside production",
    )
    api_thresholds: List[float] = Field(default_factory=lambda: [100, 300, 500, 1000])
    database_thresholds: List[float] = Field(default_factory=lambda: [50, 100, 200, 500])
    network_thresholds: List[float] = Field(
        default_factory=lambda: [100, 250, 500, 1000]
    )
    cpu_thresholds: List[float] = Field(default_factory=lambda: [30, 50, 70, 90])
    memory_thresholds: List[float] = Field(default_factory=lambda: [40, 60, 75, 90])

    @field_validator(
        "api_thresholds",
        "database_thresholds",
        "network_thresholds",
        "cpu_thresholds",
        "memory_thresholds",
    )
    @classmethod
    def _check_thresholds(cls, value: List[float]) -> List[float]:
        if len(value) != 4:
            raise ValueError("exactly four thresholds are required")
        if any(lower >= upper for lower, upper in zip(value, value[1:])):
            raise ValueError("thresholds must be strictly ascending")
        return value

    model_config = SettingsConfigDict(
        env_prefix="DIAGNOSTICS_", case_sensitive=False, extra="ignore"
    )


class AppSettings(BaseSettings):
    """Main application settings, aggregating all sub-settings."""

    environment: EnumEnvironment = Field(
        default=EnumEnvironment.DEVELOPMENT, description="Application environment"
    )

    app: AppInfoSettings = Field(default_factory=AppInfoSettings)
    server: ServerSettings = Field(default_factory=ServerSettings)
    database: DatabaseSettings = Field(default_factory=DatabaseSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    cors: CorsSettings = Field(default_factory=CorsSettings)
    diagnostics: DiagnosticsSettings = Field(default_factory=DiagnosticsSettings)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        env_nested_delimiter="__",
        extra="ignore",
    )


def get_settings() -> AppSettings:
    """
    Get application settings instance Factory.

    Kept as a function so tests can patch it.
    """
    return AppSettings()
