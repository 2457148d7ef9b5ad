"""RPC Routes: mounts every Route of the table at POST /<name>.

Invariants:
    - The raw body is handed to Route.serve untouched; decoding happens there
    - A client that already disconnected cancels the call context before the
      endpoint runs
    - Success is always 200 application/json, including domain failures
    - POST to an unmounted name raises UnknownRouteError (404)
"""

from fastapi import APIRouter, Request, Response

from stringsvc.core.endpoints import CallContext
from stringsvc.transport.binding import Route, RouteTable

JSON_MEDIA_TYPE = "application/json"


def _make_handler(route: Route):
    async def handle(request: Request) -> Response:
        ctx = CallContext(route=route.name)
        raw = await request.body()
        if await request.is_disconnected():
            ctx.cancel()
        return Response(content=route.serve(ctx, raw), media_type=JSON_MEDIA_TYPE)

    handle.__name__ = f"handle_{route.name}"
    return handle


def build_rpc_router(table: RouteTable) -> APIRouter:
    """One POST route per table entry, plus a fallback for unknown names."""
    router = APIRouter(tags=["rpc"])
    for route in table:
        router.add_api_route(
            f"/{route.name}", _make_handler(route),
            methods=["POST"], name=route.name,
        )

    # registered last so mounted names take precedence
    @router.post("/{route_name}", include_in_schema=False)
    async def dispatch_by_name(route_name: str, request: Request):
        return await _make_handler(table.lookup(route_name))(request)

    return router
