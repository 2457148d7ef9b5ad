"""Route Binding: name + decode + endpoint + encode as one unit.

Invariants:
    - serve() runs decoding -> executing -> encoding, in that order, once per call
    - The first infrastructure failure aborts the pipeline; nothing is encoded
    - Decode failures never reach the endpoint
    - A Route holds no mutable state between calls

Design Decisions:
    - Route is generic over Req/Resp so the decode output type must match the
      endpoint input type when the route is built
"""

from dataclasses import dataclass
from typing import Callable, Generic, Iterable, TypeVar

from pydantic import BaseModel

from stringsvc.core.endpoints import CallContext, Endpoint
from stringsvc.core.errors import DecodeError, UnknownRouteError

ReqT = TypeVar("ReqT", bound=BaseModel)
RespT = TypeVar("RespT", bound=BaseModel)


@dataclass(frozen=True)
class Route(Generic[ReqT, RespT]):
    name: str
    decode: Callable[[bytes], ReqT]
    endpoint: Endpoint[ReqT, RespT]
    encode: Callable[[RespT], bytes]

    def serve(self, ctx: CallContext, raw: bytes) -> bytes:
        """Run the full pipeline for one raw call."""
        try:
            request = self.decode(raw)
        except DecodeError as e:
            e.route = self.name
            raise
        response = self.endpoint(ctx, request)
        return self.encode(response)


class RouteTable:
    """Name -> Route index built once at startup. Read-only afterwards."""

    def __init__(self, routes: Iterable[Route]):
        self._routes: dict[str, Route] = {}
        for route in routes:
            if route.name in self._routes:
                raise ValueError(f"Duplicate route name: '{route.name}'")
            self._routes[route.name] = route

    def __iter__(self):
        return iter(self._routes.values())

    def __len__(self) -> int:
        return len(self._routes)

    def names(self) -> list[str]:
        return list(self._routes)

    def lookup(self, name: str) -> Route:
        route = self._routes.get(name)
        if route is None:
            raise UnknownRouteError(name)
        return route
