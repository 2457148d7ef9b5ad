"""Error Hierarchy: two disjoint taxonomies, domain errors and infrastructure errors.

Invariants:
    - DomainError is recovered at the endpoint boundary and rendered into the
      response envelope's `err` field; it never reaches the transport
    - InfrastructureError is never recovered by an endpoint; the transport maps
      it to an error status via to_response()
    - Every error has a code (str); infrastructure errors also carry
      category, severity and http_status
    - No internal details leaked in user-facing messages

Design Decisions:
    - Separate bases (DomainError, InfrastructureError) under ServiceError so a
      single `except DomainError` at the endpoint cannot swallow a decode
      failure or a cancellation
    - Both hostname and empty-input failures render "empty string" on the wire;
      the distinct code keeps them apart in logs
"""

from enum import Enum


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    CANCELLED = "cancelled"
    INTERNAL = "internal"


EMPTY_STRING_MESSAGE = "empty string"


class ServiceError(Exception):
    """Base exception for all stringsvc errors."""

    def __init__(self, message: str, code: str):
        super().__init__(message)
        self.message = message
        self.code = code


# ─── Domain Errors (rendered as data) ───────────────────────────

class DomainError(ServiceError):
    """Expected business-rule failure. Carried in the response, never raised past an endpoint."""


class EmptyInputError(DomainError):
    """Input string has zero length."""
    def __init__(self):
        super().__init__(EMPTY_STRING_MESSAGE, "EMPTY_INPUT")


class HostnameUnavailableError(DomainError):
    """Host identity lookup failed or returned nothing."""
    def __init__(self):
        super().__init__(EMPTY_STRING_MESSAGE, "HOSTNAME_UNAVAILABLE")


# ─── Infrastructure Errors (400/500-level) ──────────────────────

class InfrastructureError(ServiceError):
    """Protocol-level failure. Aborts the pipeline before a response is built."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        http_status: int = 500,
        route: str | None = None,
    ):
        super().__init__(message, code)
        self.category = category
        self.severity = severity
        self.http_status = http_status
        self.route = route

    def to_response(self) -> dict:
        """Convert to standardized REST error envelope."""
        error = {
            "code": self.code,
            "message": self.message,
            "category": self.category.value,
            "severity": self.severity.value,
        }
        if self.route is not None:
            error["route"] = self.route
        return {"error": error}


class DecodeError(InfrastructureError):
    """Raw request could not be decoded into the route's request envelope."""
    def __init__(
        self, message: str, details: list[dict] | None = None,
        route: str | None = None,
    ):
        super().__init__(
            message, "DECODE_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, 400, route,
        )
        self.details = details or []

    def to_response(self) -> dict:
        response = super().to_response()
        if self.details:
            response["error"]["details"] = self.details
        return response


class RequestCancelledError(InfrastructureError):
    """Caller went away before the capability was invoked."""
    def __init__(self, route: str | None = None):
        super().__init__(
            "Request was cancelled before execution",
            "REQUEST_CANCELLED", ErrorCategory.CANCELLED,
            ErrorSeverity.INFO, 499, route,
        )


class UnknownRouteError(InfrastructureError):
    """No route is registered under the requested name."""
    def __init__(self, route: str):
        super().__init__(
            f"Route '{route}' not found",
            "ROUTE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.WARNING, 404, route,
        )
