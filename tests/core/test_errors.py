"""Error Hierarchy: domain and infrastructure taxonomies stay disjoint.

Tests cover:
    - Domain errors carry the wire message "empty string" and distinct codes
    - Infrastructure errors map to HTTP statuses and a structured envelope
    - No domain error is an infrastructure error and vice versa
"""

from stringsvc.core.errors import (
    DecodeError, DomainError, EmptyInputError, ErrorCategory,
    HostnameUnavailableError, InfrastructureError, RequestCancelledError,
    ServiceError, UnknownRouteError,
)


def test_empty_input_error_renders_empty_string():
    err = EmptyInputError()
    assert err.message == "empty string"
    assert str(err) == "empty string"
    assert err.code == "EMPTY_INPUT"


def test_hostname_error_shares_message_but_not_code():
    err = HostnameUnavailableError()
    assert err.message == EmptyInputError().message
    assert err.code == "HOSTNAME_UNAVAILABLE"


def test_taxonomies_are_disjoint():
    for err in (EmptyInputError(), HostnameUnavailableError()):
        assert isinstance(err, DomainError)
        assert not isinstance(err, InfrastructureError)
    for err in (DecodeError("bad"), RequestCancelledError(), UnknownRouteError("x")):
        assert isinstance(err, InfrastructureError)
        assert not isinstance(err, DomainError)
        assert isinstance(err, ServiceError)


def test_decode_error_is_bad_request_with_details():
    err = DecodeError(
        "Malformed body",
        details=[{"field": "s", "message": "bad", "type": "string_type"}],
        route="uppercase",
    )
    body = err.to_response()
    assert err.http_status == 400
    assert body["error"]["code"] == "DECODE_ERROR"
    assert body["error"]["category"] == ErrorCategory.VALIDATION.value
    assert body["error"]["route"] == "uppercase"
    assert body["error"]["details"][0]["field"] == "s"


def test_decode_error_without_details_omits_key():
    assert "details" not in DecodeError("bad").to_response()["error"]


def test_envelope_omits_unknown_route():
    assert set(DecodeError("bad").to_response()["error"]) == {
        "code", "message", "category", "severity",
    }
    assert "route" not in RequestCancelledError().to_response()["error"]


def test_error_category_members():
    assert {c.value for c in ErrorCategory} == {
        "validation", "resource_not_found", "cancelled", "internal",
    }


def test_unknown_route_is_not_found():
    err = UnknownRouteError("reverse")
    assert err.http_status == 404
    assert "reverse" in err.message


def test_request_cancelled_status():
    assert RequestCancelledError(route="count").http_status == 499
