"""Steem URI signing protocol for Python.

Lets an application ask a wallet to sign a Steem transaction without ever
touching a private key. The requester encodes a transaction, a single
operation or a list of operations into a ``steem://sign/...`` URI; the
wallet decodes it, fills in the placeholders only it knows, signs and
optionally redirects to a callback carrying the signature.

URI format:
    steem://sign/<tx|op|ops>/<base64u-json-payload>[?nb&s=<signer>&cb=<base64u-url>]
    steem://sign/<alias>/<param>/<param>[/<param>][?...]

Placeholders (filled by the wallet):
    __ref_block_num, __ref_block_prefix, __expiration, __signer

Callback template vars:
    {{sig}}, {{id}}, {{block}}, {{txn}}

Environment Variables:
    STEEM_URI_EXPIRATION_SECONDS: Transaction lifetime used by
        SigningRequestHandler (default: 60)

Usage:
    ```python
    from steem_uri import (
        Parameters,
        ResolveOptions,
        decode,
        encode_op,
        resolve_transaction,
    )

    # Producer side
    uri = encode_op(
        ["vote", {"voter": "__signer", "author": "foo", "permlink": "bar", "weight": 10000}],
        Parameters(callback="https://example.com/voted?id={{id}}"),
    )

    # Signer side
    request = decode(uri)
    resolved = resolve_transaction(
        request.tx,
        request.params,
        ResolveOptions(
            ref_block_num=1234,
            ref_block_prefix=1122334455,
            expiration="2018-04-12T12:00:00",
            signers=["alice"],
            preferred_signer="alice",
        ),
    )
    ```
"""

# Constants
from .constants import (
    ACTION_SIGN,
    DEFAULT_EXPIRATION_SECONDS,
    KIND_OP,
    KIND_OPS,
    KIND_TX,
    PLACEHOLDER_EXPIRATION,
    PLACEHOLDER_REF_BLOCK_NUM,
    PLACEHOLDER_REF_BLOCK_PREFIX,
    PLACEHOLDER_SIGNER,
    PLACEHOLDERS,
    PROTOCOL,
)

# Errors
from .errors import (
    InvalidAction,
    InvalidPayload,
    InvalidProtocol,
    InvalidSigningAction,
    MalformedEncoding,
    MalformedUri,
    SignerUnavailable,
    SteemUriError,
)

# Types
from .types import (
    BlockReference,
    DecodeResult,
    Operation,
    Parameters,
    ResolveOptions,
    ResolveResult,
    SigningResult,
    Transaction,
    TransactionConfirmation,
    UnresolvedTransaction,
)

# Codecs
from .base64u import b64u_decode, b64u_encode
from .payload import decode_json, encode_json

# URI encoding and decoding
from .encoder import encode_alias, encode_op, encode_ops, encode_parameters, encode_tx
from .decoder import decode
from .aliases import ALIASES, AliasParam, SigningAlias

# Resolution
from .resolver import resolve_transaction
from .callback import resolve_callback

# Signer app integration (collaborators implemented by the wallet)
from .signer import ChainContextProvider, TransactionSigner
from .handler import SigningRequestHandler

__all__ = [
    # Constants
    "ACTION_SIGN",
    "DEFAULT_EXPIRATION_SECONDS",
    "KIND_OP",
    "KIND_OPS",
    "KIND_TX",
    "PLACEHOLDER_EXPIRATION",
    "PLACEHOLDER_REF_BLOCK_NUM",
    "PLACEHOLDER_REF_BLOCK_PREFIX",
    "PLACEHOLDER_SIGNER",
    "PLACEHOLDERS",
    "PROTOCOL",
    # Errors
    "InvalidAction",
    "InvalidPayload",
    "InvalidProtocol",
    "InvalidSigningAction",
    "MalformedEncoding",
    "MalformedUri",
    "SignerUnavailable",
    "SteemUriError",
    # Types
    "BlockReference",
    "DecodeResult",
    "Operation",
    "Parameters",
    "ResolveOptions",
    "ResolveResult",
    "SigningResult",
    "Transaction",
    "TransactionConfirmation",
    "UnresolvedTransaction",
    # Codecs
    "b64u_decode",
    "b64u_encode",
    "decode_json",
    "encode_json",
    # URI
    "encode_alias",
    "encode_op",
    "encode_ops",
    "encode_parameters",
    "encode_tx",
    "decode",
    "ALIASES",
    "AliasParam",
    "SigningAlias",
    # Resolution
    "resolve_transaction",
    "resolve_callback",
    # Signer app integration
    "ChainContextProvider",
    "TransactionSigner",
    "SigningRequestHandler",
]
