"""steem:// URI encoding."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any
from urllib.parse import quote, urlencode

from .aliases import get_alias
from .base64u import b64u_encode_str
from .constants import (
    ACTION_SIGN,
    KIND_OP,
    KIND_OPS,
    KIND_TX,
    PARAM_CALLBACK,
    PARAM_NO_BROADCAST,
    PARAM_SIGNER,
    PROTOCOL,
)
from .payload import encode_json
from .types import Operation, Parameters, Transaction, UnresolvedTransaction

_BASE_URI = f"{PROTOCOL}://{ACTION_SIGN}"


def encode_parameters(params: Parameters | None = None) -> str:
    """Encode protocol parameters to a query string.

    Keys are emitted in a fixed order (nb, s, cb) and only when set.

    Args:
        params: Protocol parameters.

    Returns:
        Query string including the leading ``?``, or an empty string.
    """
    if params is None:
        return ""

    query: list[tuple[str, str]] = []
    if params.no_broadcast is True:
        query.append((PARAM_NO_BROADCAST, ""))
    if params.signer:
        query.append((PARAM_SIGNER, params.signer))
    if params.callback:
        query.append((PARAM_CALLBACK, b64u_encode_str(params.callback)))

    if not query:
        return ""
    return "?" + urlencode(query)


def _as_json(value: Any) -> Any:
    if isinstance(value, (Transaction, UnresolvedTransaction)):
        return value.to_dict()
    return value


def encode_tx(
    tx: Transaction | UnresolvedTransaction | dict[str, Any],
    params: Parameters | None = None,
) -> str:
    """Encode a transaction to a steem: URI."""
    return f"{_BASE_URI}/{KIND_TX}/{encode_json(_as_json(tx))}{encode_parameters(params)}"


def encode_op(op: Operation, params: Parameters | None = None) -> str:
    """Encode an operation to a steem: URI."""
    return f"{_BASE_URI}/{KIND_OP}/{encode_json(op)}{encode_parameters(params)}"


def encode_ops(ops: Sequence[Operation], params: Parameters | None = None) -> str:
    """Encode several operations to a steem: URI."""
    return f"{_BASE_URI}/{KIND_OPS}/{encode_json(list(ops))}{encode_parameters(params)}"


def encode_alias(name: str, args: Sequence[Any], params: Parameters | None = None) -> str:
    """Encode an aliased operation to a steem: URI.

    Args:
        name: Alias name, e.g. "transfer".
        args: Positional alias parameters.
        params: Protocol parameters.

    Returns:
        URI with each parameter as a percent-encoded path segment.

    Raises:
        InvalidSigningAction: If the alias is unknown.
        InvalidPayload: If the arguments do not fit the alias, the same way
            decode would reject them.
    """
    values = [str(arg) for arg in args]
    get_alias(name).expand(values)
    segments = "/".join(quote(value, safe="") for value in values)
    return f"{_BASE_URI}/{name}/{segments}{encode_parameters(params)}"
