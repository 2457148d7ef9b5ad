"""JSON Codec: raw bytes <-> envelopes.

Invariants:
    - Decode fails with DecodeError on invalid JSON, non-object JSON, or a
      field of the wrong type; it never returns a partial envelope
    - Encode is total and omits absent (None) fields, so `err` only appears
      on domain failure
"""

from typing import Callable, TypeVar

from pydantic import BaseModel, ValidationError

from stringsvc.core.errors import DecodeError

ModelT = TypeVar("ModelT", bound=BaseModel)


def json_decoder(model: type[ModelT]) -> Callable[[bytes], ModelT]:
    """Build a decode function for one request envelope type."""

    def decode(raw: bytes) -> ModelT:
        try:
            return model.model_validate_json(raw)
        except ValidationError as e:
            raise DecodeError(
                f"Malformed {model.__name__} body",
                details=_error_details(e),
            ) from e

    decode.__name__ = f"decode_{model.__name__}"
    return decode


def encode_json(response: BaseModel) -> bytes:
    return response.model_dump_json(exclude_none=True).encode("utf-8")


def _error_details(exc: ValidationError) -> list[dict]:
    return [
        {
            "field": ".".join(str(loc) for loc in e["loc"]),
            "message": e["msg"],
            "type": e["type"],
        }
        for e in exc.errors(include_url=False)
    ]
