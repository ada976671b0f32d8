"""steem:// URI decoding."""

from __future__ import annotations

import logging
from typing import Any
from urllib.parse import parse_qs, unquote, urlsplit

from .aliases import get_alias, is_alias
from .base64u import b64u_decode_str
from .constants import (
    ACTION_SIGN,
    KIND_OP,
    KIND_OPS,
    KIND_TX,
    PARAM_CALLBACK,
    PARAM_NO_BROADCAST,
    PARAM_SIGNER,
    PAYLOAD_KINDS,
    PLACEHOLDER_EXPIRATION,
    PLACEHOLDER_REF_BLOCK_NUM,
    PLACEHOLDER_REF_BLOCK_PREFIX,
    PROTOCOL,
)
from .errors import (
    InvalidAction,
    InvalidPayload,
    InvalidProtocol,
    InvalidSigningAction,
    MalformedUri,
)
from .payload import decode_json
from .types import DecodeResult, Operation, Parameters, UnresolvedTransaction

logger = logging.getLogger(__name__)


def _check_operation(op: Any) -> Operation:
    if (
        not isinstance(op, list)
        or len(op) != 2
        or not isinstance(op[0], str)
        or not isinstance(op[1], dict)
    ):
        raise InvalidPayload(f"expected operation [name, {{...}}], got {op!r}")
    return op


def _wrap_operations(operations: list[Operation]) -> UnresolvedTransaction:
    return UnresolvedTransaction(
        ref_block_num=PLACEHOLDER_REF_BLOCK_NUM,
        ref_block_prefix=PLACEHOLDER_REF_BLOCK_PREFIX,
        expiration=PLACEHOLDER_EXPIRATION,
        extensions=[],
        operations=operations,
    )


def _decode_payload(kind: str, raw_payload: str) -> UnresolvedTransaction:
    payload = decode_json(raw_payload)

    if kind == KIND_TX:
        return UnresolvedTransaction.from_dict(payload)

    if kind == KIND_OP:
        return _wrap_operations([_check_operation(payload)])

    if not isinstance(payload, list):
        raise InvalidPayload(f"expected a list of operations, got {type(payload).__name__}")
    return _wrap_operations([_check_operation(op) for op in payload])


def decode_parameters(query: str) -> Parameters:
    """Decode protocol parameters from a query string (without ``?``).

    Raises:
        MalformedEncoding: If the callback is not valid Base64u.
    """
    values = parse_qs(query, keep_blank_values=True)
    params = Parameters()
    if PARAM_CALLBACK in values:
        params.callback = b64u_decode_str(values[PARAM_CALLBACK][0])
    if PARAM_NO_BROADCAST in values:
        params.no_broadcast = True
    if PARAM_SIGNER in values:
        params.signer = values[PARAM_SIGNER][0]
    return params


def decode(steem_url: str) -> DecodeResult:
    """Parse a steem:// protocol link.

    Args:
        steem_url: The ``steem:`` url to parse.

    Returns:
        DecodeResult with the unresolved transaction and parameters. Use
        :func:`steem_uri.resolve_transaction` to fill in placeholders.

    Raises:
        MalformedUri: If the url can not be parsed.
        InvalidProtocol: If the scheme is not ``steem``.
        InvalidAction: If the action is not ``sign``.
        InvalidSigningAction: If the signing kind is unknown or the path
            has the wrong shape.
        InvalidPayload: If the payload can not be decoded.
        MalformedEncoding: If the callback parameter is not valid Base64u.
    """
    if not isinstance(steem_url, str):
        raise MalformedUri(f"Expected a string, got {type(steem_url).__name__}")

    try:
        url = urlsplit(steem_url.strip())
    except ValueError as e:
        raise MalformedUri(f"Invalid URI: {e}") from e

    if not url.scheme:
        raise MalformedUri(f"Invalid URI, missing scheme: {steem_url!r}")
    if url.scheme != PROTOCOL:
        raise InvalidProtocol(url.scheme)
    if url.netloc != ACTION_SIGN:
        raise InvalidAction(url.netloc)

    segments = url.path.split("/")[1:]
    kind = segments[0] if segments else ""

    if kind in PAYLOAD_KINDS:
        if len(segments) != 2 or not segments[1]:
            raise InvalidSigningAction(kind, "expected <kind>/<payload>")
        tx = _decode_payload(kind, segments[1])
    elif is_alias(kind):
        args = [unquote(segment) for segment in segments[1:]]
        while args and not args[-1]:
            args.pop()
        tx = _wrap_operations([get_alias(kind).expand(args)])
    else:
        raise InvalidSigningAction(kind)

    params = decode_parameters(url.query)
    logger.debug("Decoded %s request with %d operation(s)", kind, len(tx.operations))
    return DecodeResult(tx=tx, params=params)
