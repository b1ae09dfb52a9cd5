"""FastAPI application factory."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from lazyscroll.api.routes.health import router as health_router
from lazyscroll.api.routes.items import item_cells, router as items_router
from lazyscroll.config.logging_config import setup_logging
from lazyscroll.config.settings import PaginationSettings, Settings, get_settings
from lazyscroll.delivery.strategies import build_strategy
from lazyscroll.pagination.errors import (
    ConfigurationError,
    MalformedPageIndex,
    UnsupportedRequestMode,
)
from lazyscroll.storage.item_store import ItemStore
from lazyscroll.storage.schema import initialize_database

logger = logging.getLogger(__name__)


def _install_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(MalformedPageIndex)
    async def malformed_page(request: Request, exc: MalformedPageIndex) -> JSONResponse:
        return JSONResponse(status_code=422, content={"detail": str(exc)})

    @app.exception_handler(UnsupportedRequestMode)
    async def unsupported_mode(request: Request, exc: UnsupportedRequestMode) -> JSONResponse:
        return JSONResponse(status_code=406, content={"detail": str(exc)})

    @app.exception_handler(ConfigurationError)
    async def misconfigured(request: Request, exc: ConfigurationError) -> JSONResponse:
        logger.error("Delivery misconfigured for %s: %s", request.url.path, exc)
        return JSONResponse(status_code=500, content={"detail": str(exc)})


def _check_pagination(pagination: PaginationSettings) -> None:
    if pagination.page_size <= 0:
        raise ConfigurationError(f"page_size must be positive, got {pagination.page_size}")
    if pagination.page_size > pagination.max_page_size:
        raise ConfigurationError(
            f"page_size {pagination.page_size} exceeds max_page_size {pagination.max_page_size}"
        )


def create_app(settings: Settings | None = None) -> FastAPI:
    """
    Build and return a fully wired FastAPI application.

    Checks the page size against its limit, configures logging,
    initializes the database, creates the item store and picks the
    delivery strategy named in settings before mounting routes.
    """
    settings = settings or get_settings()
    _check_pagination(settings.pagination)
    setup_logging(settings.logging, log_dir=settings.logs_dir)
    initialize_database(settings.db_path)

    app = FastAPI(
        title="lazyscroll",
        version="0.1.0",
        description="Infinite-scroll item listing without COUNT queries",
    )

    # Shared state, accessible via request.app.state in routes
    app.state.settings = settings
    app.state.item_store = ItemStore(settings.db_path)
    app.state.strategy = build_strategy(settings.delivery, row_template=item_cells)

    _install_error_handlers(app)

    app.include_router(health_router)
    app.include_router(items_router)

    return app
