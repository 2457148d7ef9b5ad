"""Endpoints: one uniform call shape per capability method.

Invariants:
    - An endpoint is a callable (CallContext, Req) -> Resp bound to exactly one
      capability method and one request/response envelope pair
    - DomainError is caught here and rendered into `err` with the zero value;
      it never propagates
    - InfrastructureError (e.g. RequestCancelledError) always propagates
    - A cancelled context short-circuits before the capability is touched

Design Decisions:
    - Endpoint generic over Req/Resp: the decode step and the endpoint are
      paired by type when a Route is built, so no runtime narrowing exists
    - Synchronous: every capability returns immediately, no await points
"""

import logging
import time
import uuid
from dataclasses import dataclass, field
from typing import Callable, Protocol, TypeVar

from pydantic import BaseModel

from stringsvc.core.capabilities import OSInfoService, StringService
from stringsvc.core.errors import DomainError, RequestCancelledError
from stringsvc.schemas.rpc import (
    CountRequest, CountResponse,
    HostnameRequest, HostnameResponse,
    UppercaseRequest, UppercaseResponse,
)

logger = logging.getLogger(__name__)

ReqT = TypeVar("ReqT", bound=BaseModel, contravariant=True)
RespT = TypeVar("RespT", bound=BaseModel, covariant=True)


@dataclass
class CallContext:
    """Per-call context. Created by the transport, dropped when the call ends."""
    route: str
    request_id: str = field(default_factory=lambda: uuid.uuid4().hex)
    _cancelled: bool = field(default=False, init=False, repr=False)

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    def cancel(self) -> None:
        self._cancelled = True


class Endpoint(Protocol[ReqT, RespT]):
    """Uniform operation: request envelope in, response envelope out."""

    def __call__(self, ctx: CallContext, request: ReqT) -> RespT: ...


def _check_cancelled(ctx: CallContext) -> None:
    if ctx.cancelled:
        raise RequestCancelledError(route=ctx.route)


def make_uppercase_endpoint(
    svc: StringService,
) -> Endpoint[UppercaseRequest, UppercaseResponse]:
    def uppercase_endpoint(
        ctx: CallContext, request: UppercaseRequest,
    ) -> UppercaseResponse:
        _check_cancelled(ctx)
        try:
            v = svc.uppercase(request.s)
        except DomainError as e:
            return UppercaseResponse(v="", err=e.message)
        return UppercaseResponse(v=v)
    return uppercase_endpoint


def make_count_endpoint(
    svc: StringService,
) -> Endpoint[CountRequest, CountResponse]:
    def count_endpoint(ctx: CallContext, request: CountRequest) -> CountResponse:
        _check_cancelled(ctx)
        return CountResponse(v=svc.count(request.s))
    return count_endpoint


def make_hostname_endpoint(
    svc: OSInfoService,
) -> Endpoint[HostnameRequest, HostnameResponse]:
    def hostname_endpoint(
        ctx: CallContext, request: HostnameRequest,
    ) -> HostnameResponse:
        _check_cancelled(ctx)
        try:
            v = svc.hostname()
        except DomainError as e:
            return HostnameResponse(v="", err=e.message)
        return HostnameResponse(v=v)
    return hostname_endpoint


# ─── Middleware ──────────────────────────────────────────────────

Middleware = Callable[[Endpoint], Endpoint]


def logging_middleware(endpoint: Endpoint[ReqT, RespT]) -> Endpoint[ReqT, RespT]:
    """Log each call with its duration. Request and response pass through untouched."""

    def logged_endpoint(ctx: CallContext, request):
        started = time.perf_counter()
        response = endpoint(ctx, request)
        duration_ms = round((time.perf_counter() - started) * 1000, 3)
        extra = {
            "route": ctx.route,
            "request_id": ctx.request_id,
            "duration_ms": duration_ms,
        }
        err = getattr(response, "err", None)
        if err:
            logger.info(f"Domain failure on '{ctx.route}': {err}", extra=extra)
        else:
            logger.debug(f"Handled '{ctx.route}'", extra=extra)
        return response

    return logged_endpoint
