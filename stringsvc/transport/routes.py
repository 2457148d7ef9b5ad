"""Route Table: the explicit list of every exposed operation.

Invariants:
    - Every mapping visible here; adding a route requires editing build_routes
    - Each route pairs the decoder of envelope X with the endpoint for X
"""

from typing import Sequence

from stringsvc.core.capabilities import OSInfoService, StringService
from stringsvc.core.endpoints import (
    Endpoint, Middleware, logging_middleware,
    make_count_endpoint, make_hostname_endpoint, make_uppercase_endpoint,
)
from stringsvc.schemas.rpc import CountRequest, HostnameRequest, UppercaseRequest
from stringsvc.transport.binding import Route
from stringsvc.transport.json_codec import encode_json, json_decoder

DEFAULT_MIDDLEWARE: tuple[Middleware, ...] = (logging_middleware,)


def _chain(endpoint: Endpoint, middleware: Sequence[Middleware]) -> Endpoint:
    # first middleware is outermost
    for wrap in reversed(middleware):
        endpoint = wrap(endpoint)
    return endpoint


def build_routes(
    string_service: StringService,
    os_info_service: OSInfoService,
    middleware: Sequence[Middleware] = DEFAULT_MIDDLEWARE,
) -> tuple[Route, ...]:
    """Wire capabilities to named JSON routes."""
    return (
        Route(
            name="uppercase",
            decode=json_decoder(UppercaseRequest),
            endpoint=_chain(make_uppercase_endpoint(string_service), middleware),
            encode=encode_json,
        ),
        Route(
            name="count",
            decode=json_decoder(CountRequest),
            endpoint=_chain(make_count_endpoint(string_service), middleware),
            encode=encode_json,
        ),
        Route(
            name="hostname",
            decode=json_decoder(HostnameRequest),
            endpoint=_chain(make_hostname_endpoint(os_info_service), middleware),
            encode=encode_json,
        ),
    )
