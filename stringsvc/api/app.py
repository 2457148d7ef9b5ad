"""Application Factory: builds the FastAPI transport around a route table.

Invariants:
    - Routes come only from the table passed in (no ambient registry)
    - Duplicate route names fail at construction with ValueError
    - Logging configured once, on startup, via lifespan
"""

import logging
from contextlib import asynccontextmanager
from typing import Iterable

from fastapi import FastAPI

from stringsvc import __version__
from stringsvc.api.error_handlers import register_error_handlers
from stringsvc.api.routes import health
from stringsvc.api.routes.rpc import build_rpc_router
from stringsvc.config import Settings, get_settings
from stringsvc.infrastructure.observability import setup_logging
from stringsvc.transport.binding import Route, RouteTable

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings: Settings = app.state.settings
    handler = setup_logging(settings.log_level, settings.log_format)
    logger.info(
        f"{settings.service_name} started with routes "
        f"{app.state.route_table.names()}",
    )
    yield
    logger.info(f"{settings.service_name} shutting down")
    logging.root.removeHandler(handler)


def create_app(
    routes: Iterable[Route], settings: Settings | None = None,
) -> FastAPI:
    settings = settings or get_settings()
    table = RouteTable(routes)

    app = FastAPI(
        title=settings.service_name, version=__version__, lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.route_table = table

    register_error_handlers(app)
    app.include_router(health.router)
    app.include_router(build_rpc_router(table))
    return app
