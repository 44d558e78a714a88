"""DTOs for the application info endpoint."""

from __future__ import annotations

from datetime import datetime
from typing import List

from pydantic import BaseModel, Field

from healthboard.domain.entities.health import ApplicationInfo, EndpointInfo


class EndpointInfoDTO(BaseModel):
    path: str
    method: str
    description: str

    @classmethod
    def from_domain(cls, endpoint: EndpointInfo) -> "EndpointInfoDTO":
        return cls(
            path=endpoint.path,
            method=endpoint.method,
            description=endpoint.description,
        )


class ApplicationInfoDTO(BaseModel):
    """DTO representing metadata returned by /help/info."""

    name: str = Field(description="Application name")
    description: str = Field(description="Application description")
    version: str = Field(description="Application version")
    authors: List[str] = Field(default_factory=list, description="Package authors")
    environment: str = Field(description="Current deployment environment")
    git_commit: str = Field(description="Git commit hash")
    build_time: str = Field(description="Build timestamp")
    started_at: datetime = Field(description="Process start timestamp")
    uptime_seconds: float = Field(description="Process uptime in seconds")
    endpoints: List[EndpointInfoDTO] = Field(
        default_factory=list, description="Diagnostics endpoints"
    )

    @classmethod
    def from_domain(cls, info: ApplicationInfo) -> "ApplicationInfoDTO":
        return cls(
            name=info.name,
            description=info.description,
            version=info.version,
            authors=list(info.authors),
            environment=info.environment,
            git_commit=info.git_commit,
            build_time=info.build_time,
            started_at=info.started_at,
            uptime_seconds=info.uptime_seconds,
            endpoints=[EndpointInfoDTO.from_domain(item) for item in info.endpoints],
        )

    model_config = {
        "json_schema_extra": {
            "example": {
                "name": "healthboard",
                "description": "REST service with built-in health diagnostics",
                "version": "0.1.0",
                "authors": ["Healthboard maintainers"],
                "environment": "development",
                "git_commit": "abcdef1",
                "build_time": "2024-09-09T11:30:00Z",
                "started_at": "2024-09-09T12:00:00Z",
                "uptime_seconds": 3600.5,
                "endpoints": [
                    {
                        "path": "/help/ping",
                        "method": "GET",
                        "description": "Simple connectivity check",
                    }
                ],
            }
        }
    }
