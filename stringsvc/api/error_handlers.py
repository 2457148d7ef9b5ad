"""Error Handlers: global exception handlers for the HTTP transport.

Invariants:
    - InfrastructureError -> structured JSON error envelope with its http_status
    - Exception (catch-all) -> 500, never leaks internal details
    - Neither handler ever emits a response envelope (no `v`, no `err`)

Design Decisions:
    - DomainError has no handler: endpoints render it as data, so reaching the
      transport would be a bug and falls to the catch-all
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from stringsvc.core.errors import ErrorCategory, ErrorSeverity, InfrastructureError

logger = logging.getLogger(__name__)

_LOG_LEVELS = {
    ErrorSeverity.INFO: logging.INFO,
    ErrorSeverity.WARNING: logging.WARNING,
    ErrorSeverity.ERROR: logging.ERROR,
    ErrorSeverity.CRITICAL: logging.CRITICAL,
}


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_infrastructure_error_handler(app)
    _register_generic_error_handler(app)


def _register_infrastructure_error_handler(app: FastAPI) -> None:

    @app.exception_handler(InfrastructureError)
    async def infrastructure_error_handler(
        request: Request, exc: InfrastructureError,
    ):
        logger.log(
            _LOG_LEVELS[exc.severity],
            f"{type(exc).__name__}: {exc.message}",
            extra={
                "error_code": exc.code,
                "route": exc.route,
                "path": request.url.path,
            },
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_generic_error_handler(app: FastAPI) -> None:

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all: never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "error": {
                    "code": "INTERNAL_ERROR",
                    "message": "An unexpected error occurred",
                    "category": ErrorCategory.INTERNAL.value,
                    "severity": ErrorSeverity.CRITICAL.value,
                },
            },
        )
