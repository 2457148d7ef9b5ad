"""Health Probe: liveness endpoint for container orchestration.

Invariants:
    - GET /health always returns 200 if the process is up
    - Lists the RPC routes mounted on this app
"""

from fastapi import APIRouter, Request, status

from stringsvc import __version__

router = APIRouter(prefix="/health", tags=["health"])


@router.get("", status_code=status.HTTP_200_OK)
async def health_check(request: Request):
    """Basic liveness probe."""
    return {
        "status": "healthy",
        "service": request.app.state.settings.service_name,
        "version": __version__,
        "routes": request.app.state.route_table.names(),
    }
