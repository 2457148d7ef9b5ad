"""RPC Envelopes: one request and one response model per route.

Invariants:
    - Request models hold exactly the fields their operation needs
    - A missing `s` decodes to "" (the empty string reaches the capability,
      which decides whether that is a domain failure)
    - A non-string `s` is a validation failure, never coerced
    - Response `err` is None on success and omitted on the wire
    - Request keys match field names case-insensitively ("S" fills `s`);
      when several keys match one field, the last one wins

Design Decisions:
    - frozen=True: envelopes are built by decode and consumed once
    - strict=True: pydantic would otherwise accept e.g. b"" for str fields
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, model_validator


class Envelope(BaseModel):
    """Base for all envelopes. Immutable, unknown fields ignored."""
    model_config = ConfigDict(frozen=True, strict=True, extra="ignore")

    @model_validator(mode="before")
    @classmethod
    def fold_field_names(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        names = {name.lower(): name for name in cls.model_fields}
        folded = {}
        for key, value in data.items():
            name = names.get(key.lower()) if isinstance(key, str) else None
            if name is not None:
                folded[name] = value
        return folded


# --- uppercase ----------------------------------------------------------------

class UppercaseRequest(Envelope):
    s: str = ""


class UppercaseResponse(Envelope):
    v: str
    err: str | None = None


# --- count --------------------------------------------------------------------

class CountRequest(Envelope):
    s: str = ""


class CountResponse(Envelope):
    v: int


# --- hostname -----------------------------------------------------------------

class HostnameRequest(Envelope):
    pass


class HostnameResponse(Envelope):
    v: str
    err: str | None = None
