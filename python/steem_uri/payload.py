"""Payload codec - compact JSON carried as Base64u."""

from __future__ import annotations

import json
from typing import Any

from .base64u import b64u_decode, b64u_encode
from .errors import InvalidPayload, MalformedEncoding


def to_json(value: Any) -> str:
    """Serialize a value to compact JSON.

    Keys keep their insertion order and non-ASCII text is emitted as UTF-8,
    so the same value always produces the same payload.
    """
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False, allow_nan=False)


def encode_json(value: Any) -> str:
    """Encode a JSON-compatible value as a Base64u payload.

    Args:
        value: Transaction, operation or operation list (plain JSON data).

    Returns:
        Base64u string of the compact JSON text.
    """
    return b64u_encode(to_json(value).encode("utf-8"))


def decode_json(payload: str) -> Any:
    """Decode a Base64u payload back into JSON data.

    Args:
        payload: Base64u string.

    Returns:
        Parsed JSON value.

    Raises:
        InvalidPayload: If the payload is not Base64u, not UTF-8 or not JSON.
            The underlying error is chained and kept as ``cause``.
    """
    try:
        raw = b64u_decode(payload)
    except MalformedEncoding as e:
        raise InvalidPayload(str(e), cause=e) from e

    try:
        return json.loads(raw.decode("utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        raise InvalidPayload(str(e), cause=e) from e
