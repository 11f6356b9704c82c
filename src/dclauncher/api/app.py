"""FastAPI application setup."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from dclauncher import __version__
from dclauncher.api.dependencies import build_services
from dclauncher.api.models import ErrorResponse
from dclauncher.api.routes import android, projects
from dclauncher.config import ConfigurationError, LauncherSettings
from dclauncher.inventory import InventoryError

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

logger = logging.getLogger("dclauncher.api")


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager."""
    # Startup
    services = getattr(app.state, "services", None)
    owned = services is None
    if owned:
        services = build_services(app.state.settings)
        app.state.services = services
    logger.info("DCLauncher API ready (projects dir: %s)", services.settings.projects_dir)

    yield
    # Shutdown
    if owned:
        services.close()
        app.state.services = None


def create_app(settings: LauncherSettings | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        settings: Launcher locations. Read from the environment if omitted.
    """
    app = FastAPI(
        title="DCLauncher API",
        description="REST API for DCLauncher - launch and monitor project fleets",
        version=__version__,
        lifespan=lifespan,
    )

    # Store config for lifespan manager
    app.state.settings = settings or LauncherSettings.from_env()

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Exception handlers
    @app.exception_handler(ConfigurationError)
    async def configuration_error_handler(
        _request: Request, exc: ConfigurationError
    ) -> JSONResponse:
        logger.error("Configuration error: %s", exc)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=ErrorResponse(error=str(exc)).model_dump(),
        )

    @app.exception_handler(InventoryError)
    async def inventory_error_handler(_request: Request, exc: InventoryError) -> JSONResponse:
        logger.error("Error fetching projects: %s", exc)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=ErrorResponse(error=str(exc)).model_dump(),
        )

    # Include routers
    app.include_router(projects.router, prefix="/api")
    app.include_router(android.router, prefix="/api")

    return app
