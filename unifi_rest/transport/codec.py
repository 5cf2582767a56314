"""Envelope codec: JSON request bodies out, ``{meta, data}`` envelopes in."""

from __future__ import annotations

import json
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from unifi_rest.errors import DecodeError
from unifi_rest.models.envelope import Envelope

T = TypeVar("T")


def encode_body(body: Any) -> bytes:
    """Serialize a structured value (or pydantic model) to JSON bytes."""
    if isinstance(body, BaseModel):
        body = body.model_dump(mode="json", by_alias=True)
    return json.dumps(body, separators=(",", ":")).encode("utf-8")


def decode_envelope(raw: bytes, item_type: type[T] = dict) -> Envelope[T]:  # type: ignore[assignment]
    """Parse a response body into an ``Envelope[item_type]``.

    Raises
    ------
    DecodeError
        If the body is not JSON, lacks ``meta``, or its data items do not
        match ``item_type``. The raw body is kept on the error.
    """
    try:
        return Envelope[item_type].model_validate_json(raw)  # type: ignore[valid-type]
    except ValidationError as exc:
        raise DecodeError(
            f"Malformed response envelope: {exc.error_count()} validation error(s)",
            raw_body=raw,
        ) from exc
