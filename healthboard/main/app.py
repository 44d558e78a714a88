"""
Main Application - Main Layer

This module serves as the entry point for the FastAPI application.
It initializes the container, creates the FastAPI app, and includes
the API routers.
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from healthboard.main.config import get_settings
from healthboard.main.container import app_lifespan, init_container
from healthboard.presentation.controllers import help_router, status_router
from healthboard.presentation.middleware import install_request_timing
from healthboard.shared import (
    configure_logging,
    get_logger,
    update_logging_from_settings,
)

# Logging must work while the settings are loading
configure_logging()

settings = get_settings()

update_logging_from_settings(settings)

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan management.

    Starts the diagnostics sampler on startup and stops it on shutdown
    through the container's app_lifespan.
    """
    logger.info("Application starting up")

    async with app_lifespan() as container:
        app.state.container = container
        yield

    logger.info("Application shutting down")


def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns:
        FastAPI: The configured FastAPI application
    """
    settings = get_settings()

    container = init_container(settings)

    app = FastAPI(
        title=settings.app.title,
        description=settings.app.description,
        version=settings.app.version,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors.allowed_origins,
        allow_credentials=True,
        allow_methods=settings.cors.allowed_methods,
        allow_headers=settings.cors.allowed_headers,
    )

    install_request_timing(app, container.latency_tracker())

    app.include_router(help_router)
    app.include_router(status_router)

    return app


app = create_app()
