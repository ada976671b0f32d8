"""Placeholder resolution for unresolved transactions."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from .constants import (
    PLACEHOLDER_EXPIRATION,
    PLACEHOLDER_REF_BLOCK_NUM,
    PLACEHOLDER_REF_BLOCK_PREFIX,
    PLACEHOLDER_SIGNER,
)
from .errors import SignerUnavailable
from .types import (
    Parameters,
    ResolveOptions,
    ResolveResult,
    Transaction,
    UnresolvedTransaction,
)

logger = logging.getLogger(__name__)


def substitute(value: Any, context: Mapping[str, Any]) -> Any:
    """Replace whole-value placeholder strings inside JSON data.

    Only strings exactly equal to a key of ``context`` are replaced, and
    the replacement keeps the type of the mapped value. Strings that merely
    contain a token are left alone, as are unknown tokens. Lists keep their
    order and objects keep all keys in their original order.

    Args:
        value: JSON value (str, int, float, bool, None, list or dict).
        context: Token -> replacement value.

    Returns:
        A new value with placeholders substituted. The input is not modified.
    """
    if isinstance(value, str):
        return context[value] if value in context else value
    if isinstance(value, list):
        return [substitute(item, context) for item in value]
    if isinstance(value, dict):
        return {key: substitute(item, context) for key, item in value.items()}
    # numbers, booleans and null pass through
    return value


def resolve_signer(params: Parameters, options: ResolveOptions) -> str:
    """Pick the signing account for a request.

    Args:
        params: Decoded protocol parameters.
        options: Resolution options from the signer app.

    Returns:
        The requested signer, or the preferred one if none was requested.

    Raises:
        SignerUnavailable: If that account is not in ``options.signers``.
    """
    signer = params.signer or options.preferred_signer
    if not signer or signer not in options.signers:
        raise SignerUnavailable(signer)
    return signer


def resolve_transaction(
    utx: UnresolvedTransaction,
    params: Parameters,
    options: ResolveOptions,
) -> ResolveResult:
    """Resolve placeholders in a transaction.

    Args:
        utx: Unresolved transaction data.
        params: Protocol parameters.
        options: Values to use when resolving.

    Returns:
        ResolveResult with the resolved transaction and signer.

    Raises:
        SignerUnavailable: If the selected signer is not available.
    """
    signer = resolve_signer(params, options)
    context = {
        PLACEHOLDER_REF_BLOCK_NUM: options.ref_block_num,
        PLACEHOLDER_REF_BLOCK_PREFIX: options.ref_block_prefix,
        PLACEHOLDER_EXPIRATION: options.expiration,
        PLACEHOLDER_SIGNER: signer,
    }
    tx = Transaction.from_dict(substitute(utx.to_dict(), context))
    logger.debug("Resolved transaction with %d operation(s) for %s", len(tx.operations), signer)
    return ResolveResult(tx=tx, signer=signer)
