"""
FastAPI application factory and configuration.

Creates and configures the main FastAPI application with:
- The shared filter catalog
- API routes
- OpenAPI documentation
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from anyio import to_thread
from fastapi import FastAPI

from chemapi_core.chem import build_filter_catalog
from chemapi_core.config import get_core_settings
from chemapi_server.config import ServerSettings, get_server_settings
from chemapi_server.errors import register_error_handlers
from chemapi_server.routes import (
    filters_router,
    health_router,
    identifiers_router,
    mcs_router,
    properties_router,
)


logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan manager.

    Sizes the worker pool and announces the server before traffic is
    accepted.
    """
    settings: ServerSettings = app.state.settings

    # Sync endpoints run on anyio worker threads; this limiter is the pool
    limiter = to_thread.current_default_thread_limiter()
    limiter.total_tokens = settings.threads
    logger.info(f"Worker pool sized to {settings.threads} threads")

    print(settings.startup_banner, flush=True)

    yield

    logger.info("chemapi server shutdown complete")


def create_app(settings: Optional[ServerSettings] = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        settings: Server settings; defaults to the cached environment settings.

    Returns:
        Configured FastAPI application instance.
    """
    settings = settings or get_server_settings()

    app = FastAPI(
        title=settings.api_title,
        description=settings.api_description,
        version=settings.api_version,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )
    app.state.settings = settings

    # Built once here, before any request can be served, and never mutated
    app.state.filter_catalog = build_filter_catalog(get_core_settings().filter_catalogs)

    register_error_handlers(app)

    app.include_router(health_router)
    app.include_router(identifiers_router)
    app.include_router(properties_router)
    app.include_router(filters_router)
    app.include_router(mcs_router)

    return app
