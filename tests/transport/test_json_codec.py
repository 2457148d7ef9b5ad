"""JSON Codec: decode failures are DecodeError; encode omits absent fields.

Tests cover:
    - Valid objects decode, missing `s` becomes ""
    - Invalid JSON, non-object JSON and wrong field types raise DecodeError
    - Encoded responses carry `err` only when set
"""

import json

import pytest

from stringsvc.core.errors import DecodeError
from stringsvc.schemas.rpc import (
    CountResponse, HostnameRequest, HostnameResponse,
    UppercaseRequest, UppercaseResponse,
)
from stringsvc.transport.json_codec import encode_json, json_decoder


def test_decode_valid_object():
    assert json_decoder(UppercaseRequest)(b'{"s": "hi"}') == UppercaseRequest(s="hi")


def test_decode_missing_field_is_empty_string():
    assert json_decoder(UppercaseRequest)(b"{}").s == ""


def test_decode_ignores_unknown_fields():
    assert json_decoder(UppercaseRequest)(b'{"s": "a", "x": 1}').s == "a"


@pytest.mark.parametrize("raw", [b'{"S": "hi"}', b'{"s": "hi"}'])
def test_decode_field_names_case_insensitive(raw):
    assert json_decoder(UppercaseRequest)(raw).s == "hi"


def test_decode_last_matching_key_wins():
    assert json_decoder(UppercaseRequest)(b'{"s": "a", "S": "b"}').s == "b"


def test_decode_case_folded_key_still_type_checked():
    with pytest.raises(DecodeError):
        json_decoder(UppercaseRequest)(b'{"S": 5}')


def test_decode_hostname_accepts_empty_object():
    assert json_decoder(HostnameRequest)(b"{}") == HostnameRequest()


@pytest.mark.parametrize("raw", [
    b"",
    b"not json",
    b'{"s": "unterminated',
    b"[]",
    b"null",
    b'"hi"',
    b'{"s": 5}',
    b'{"s": null}',
    b'{"s": ["a"]}',
])
def test_decode_malformed_raises(raw):
    with pytest.raises(DecodeError):
        json_decoder(UppercaseRequest)(raw)


def test_decode_error_names_bad_field():
    with pytest.raises(DecodeError) as exc_info:
        json_decoder(UppercaseRequest)(b'{"s": 5}')
    assert exc_info.value.details[0]["field"] == "s"
    assert "UppercaseRequest" in exc_info.value.message


def test_encode_omits_absent_err():
    assert json.loads(encode_json(UppercaseResponse(v="HI"))) == {"v": "HI"}


def test_encode_keeps_err_and_empty_value():
    raw = encode_json(UppercaseResponse(v="", err="empty string"))
    assert json.loads(raw) == {"v": "", "err": "empty string"}


def test_encode_count_and_hostname():
    assert json.loads(encode_json(CountResponse(v=5))) == {"v": 5}
    assert json.loads(encode_json(HostnameResponse(v="box"))) == {"v": "box"}


def test_encode_is_utf8():
    assert encode_json(UppercaseResponse(v="É")).decode("utf-8") == '{"v":"É"}'
