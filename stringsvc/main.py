"""stringsvc: FastAPI application entry point.

Invariants:
    - Capabilities instantiated once here and injected into the route table
    - Route table built explicitly and handed to create_app
"""

import uvicorn
from fastapi import FastAPI

from stringsvc.api.app import create_app
from stringsvc.config import get_settings
from stringsvc.services.os_info_service import SystemOSInfoService
from stringsvc.services.string_service import BasicStringService
from stringsvc.transport.routes import build_routes


def build_app() -> FastAPI:
    routes = build_routes(BasicStringService(), SystemOSInfoService())
    return create_app(routes, get_settings())


app = build_app()


def run() -> None:
    """Serve `app` until the process is stopped."""
    settings = get_settings()
    uvicorn.run(app, host=settings.host, port=settings.port, log_config=None)
