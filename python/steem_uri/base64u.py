"""URL-safe Base64 ("Base64u") codec.

Standard padded Base64 with three substitutions so the result can sit in
a URI path or query value untouched: ``+`` -> ``-``, ``/`` -> ``_`` and
``=`` -> ``.``.
"""

from __future__ import annotations

import base64
import binascii
import re

from .constants import B64U_DECODE_TABLE, B64U_ENCODE_TABLE, B64U_REGEX
from .errors import MalformedEncoding

_B64U_RE = re.compile(B64U_REGEX)


def b64u_encode(data: bytes) -> str:
    """Encode bytes as Base64u text.

    Args:
        data: Raw bytes.

    Returns:
        Padded Base64u string.
    """
    return base64.b64encode(data).decode("ascii").translate(B64U_ENCODE_TABLE)


def b64u_decode(text: str) -> bytes:
    """Decode Base64u text to bytes.

    Args:
        text: Base64u string (with ``.`` padding).

    Returns:
        Decoded bytes.

    Raises:
        MalformedEncoding: If text uses characters outside the Base64u
            alphabet, has invalid padding or is not the canonical encoding
            of its bytes.
    """
    if not isinstance(text, str) or not _B64U_RE.fullmatch(text):
        raise MalformedEncoding(f"Invalid base64u encoding: {text!r}")

    try:
        data = base64.b64decode(text.translate(B64U_DECODE_TABLE), validate=True)
    except binascii.Error as e:
        raise MalformedEncoding(f"Invalid base64u encoding: {e}") from e

    # b64decode tolerates surplus padding and set trailing bits
    if b64u_encode(data) != text:
        raise MalformedEncoding(f"Non-canonical base64u encoding: {text!r}")
    return data


def b64u_encode_str(text: str) -> str:
    """Encode a UTF-8 string as Base64u."""
    return b64u_encode(text.encode("utf-8"))


def b64u_decode_str(text: str) -> str:
    """Decode Base64u text holding a UTF-8 string.

    Raises:
        MalformedEncoding: If text is not Base64u or not UTF-8 once decoded.
    """
    try:
        return b64u_decode(text).decode("utf-8")
    except UnicodeDecodeError as e:
        raise MalformedEncoding(f"Decoded base64u is not UTF-8: {e}") from e
