"""Steem URI types - dataclasses for transactions, parameters and results."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from .constants import MAX_REF_BLOCK_NUM, MAX_REF_BLOCK_PREFIX
from .errors import InvalidPayload

# An operation is a JSON pair: [name, {field: value, ...}]
Operation = list[Any]

_TRANSACTION_FIELDS = (
    "ref_block_num",
    "ref_block_prefix",
    "expiration",
    "extensions",
    "operations",
)
_REQUIRED_FIELDS = ("ref_block_num", "ref_block_prefix", "expiration", "operations")


@dataclass
class Parameters:
    """Protocol parameters shared by every signing action.

    Attributes:
        signer: Requested signer account.
        callback: Redirect URL, may contain {{sig}}/{{id}}/{{block}}/{{txn}}.
        no_broadcast: Whether to only sign the transaction.
    """

    signer: str | None = None
    callback: str | None = None
    no_broadcast: bool = False

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary, leaving out unset parameters."""
        result: dict[str, Any] = {}
        if self.signer:
            result["signer"] = self.signer
        if self.callback:
            result["callback"] = self.callback
        if self.no_broadcast:
            result["no_broadcast"] = True
        return result

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Parameters":
        return cls(
            signer=data.get("signer"),
            callback=data.get("callback"),
            no_broadcast=bool(data.get("no_broadcast", False)),
        )


def _split_fields(data: Any) -> dict[str, Any]:
    if not isinstance(data, dict):
        raise InvalidPayload(f"transaction must be an object, got {type(data).__name__}")

    missing = [name for name in _REQUIRED_FIELDS if name not in data]
    if missing:
        raise InvalidPayload(f"transaction missing fields: {', '.join(missing)}")

    if not isinstance(data["operations"], list):
        raise InvalidPayload("transaction operations must be a list")

    # None means the payload had no extensions key
    extensions = data.get("extensions")
    if "extensions" in data and not isinstance(extensions, list):
        raise InvalidPayload("transaction extensions must be a list")

    return {
        "ref_block_num": data["ref_block_num"],
        "ref_block_prefix": data["ref_block_prefix"],
        "expiration": data["expiration"],
        "operations": data["operations"],
        "extensions": extensions,
        "extra": {k: v for k, v in data.items() if k not in _TRANSACTION_FIELDS},
        "key_order": tuple(data),
    }


def _transaction_dict(tx: "UnresolvedTransaction | Transaction") -> dict[str, Any]:
    values: dict[str, Any] = {
        "ref_block_num": tx.ref_block_num,
        "ref_block_prefix": tx.ref_block_prefix,
        "expiration": tx.expiration,
    }
    if tx.extensions is not None:
        values["extensions"] = list(tx.extensions)
    values["operations"] = list(tx.operations)
    values.update(tx.extra)

    # Decoded payloads keep their key order, the rest follow
    result = {key: values[key] for key in tx.key_order if key in values}
    for key, value in values.items():
        result.setdefault(key, value)
    return result


@dataclass
class UnresolvedTransaction:
    """A transaction that may still contain placeholder tokens.

    The block reference and expiration fields hold either their concrete
    value or one of the ``__ref_block_num``, ``__ref_block_prefix`` and
    ``__expiration`` tokens. Operations may reference ``__signer``.
    Use :func:`steem_uri.resolve_transaction` to turn it into a
    :class:`Transaction`.

    Attributes:
        ref_block_num: Reference block number or placeholder.
        ref_block_prefix: Reference block prefix or placeholder.
        expiration: Expiration time string or placeholder.
        operations: List of [name, fields] operations.
        extensions: Transaction extensions (normally empty). None when a
            decoded payload had no extensions key.
        extra: Any other keys present in the payload, preserved as-is.
        key_order: Top-level key order of the decoded payload.
    """

    ref_block_num: int | str
    ref_block_prefix: int | str
    expiration: str
    operations: list[Operation] = field(default_factory=list)
    extensions: list[Any] | None = field(default_factory=list)
    extra: dict[str, Any] = field(default_factory=dict)
    key_order: tuple[str, ...] = field(default=(), repr=False, compare=False)

    def to_dict(self) -> dict[str, Any]:
        """Convert to the JSON transaction shape."""
        return _transaction_dict(self)

    @classmethod
    def from_dict(cls, data: Any) -> "UnresolvedTransaction":
        """Create from decoded JSON data.

        Args:
            data: Decoded transaction object.

        Returns:
            UnresolvedTransaction instance.

        Raises:
            InvalidPayload: If data is not an object with ref_block_num,
                ref_block_prefix, expiration and a list of operations.
        """
        return cls(**_split_fields(data))


@dataclass
class Transaction:
    """A fully resolved transaction ready to be signed."""

    ref_block_num: int
    ref_block_prefix: int
    expiration: str
    operations: list[Operation] = field(default_factory=list)
    extensions: list[Any] | None = field(default_factory=list)
    extra: dict[str, Any] = field(default_factory=dict)
    key_order: tuple[str, ...] = field(default=(), repr=False, compare=False)

    def to_dict(self) -> dict[str, Any]:
        return _transaction_dict(self)

    @classmethod
    def from_dict(cls, data: Any) -> "Transaction":
        return cls(**_split_fields(data))


@dataclass
class DecodeResult:
    """Result of decoding a steem:// URI.

    Attributes:
        tx: Decoded transaction, may contain placeholders.
        params: Decoded protocol parameters.
    """

    tx: UnresolvedTransaction
    params: Parameters = field(default_factory=Parameters)


class ResolveOptions(BaseModel):
    """Values the signer app supplies when resolving placeholders.

    Attributes:
        ref_block_num: Fills ``__ref_block_num``.
        ref_block_prefix: Fills ``__ref_block_prefix``.
        expiration: Date string filling ``__expiration``.
        signers: Accounts the app holds keys for.
        preferred_signer: Signer used when the URI does not request one.
    """

    model_config = ConfigDict(frozen=True)

    ref_block_num: int = Field(ge=0, le=MAX_REF_BLOCK_NUM)
    ref_block_prefix: int = Field(ge=0, le=MAX_REF_BLOCK_PREFIX)
    expiration: str = Field(min_length=1)
    signers: list[str] = Field(default_factory=list)
    preferred_signer: str | None = None


@dataclass
class ResolveResult:
    """Resolved transaction and the account that should sign it."""

    tx: Transaction
    signer: str


@dataclass
class TransactionConfirmation:
    """Signature and, when broadcast, inclusion details of a transaction.

    Attributes:
        sig: Hex encoded transaction signature.
        id: Hex encoded transaction hash.
        block: Block number the transaction was included in.
        txn: Index of the transaction in its block.
    """

    sig: str
    id: str | None = None
    block: int | None = None
    txn: int | None = None

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {"sig": self.sig}
        if self.id is not None:
            result["id"] = self.id
        if self.block is not None:
            result["block"] = self.block
        if self.txn is not None:
            result["txn"] = self.txn
        return result

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "TransactionConfirmation":
        return cls(
            sig=data["sig"],
            id=data.get("id"),
            block=data.get("block"),
            txn=data.get("txn"),
        )


@dataclass
class BlockReference:
    """Chain head information used to fill the block placeholders.

    Attributes:
        ref_block_num: Low 16 bits of the reference block number.
        ref_block_prefix: First 4 bytes of the reference block id (uint32).
        head_block_time: Timestamp of the head block (UTC).
    """

    ref_block_num: int
    ref_block_prefix: int
    head_block_time: datetime


@dataclass
class SigningResult:
    """Outcome of handling a signing request in a signer app.

    Attributes:
        tx: The signed transaction.
        signer: Account that signed.
        confirmation: Signature plus inclusion details when broadcast.
        redirect_url: Resolved callback URL, or None when no callback was given.
    """

    tx: Transaction
    signer: str
    confirmation: TransactionConfirmation
    redirect_url: str | None = None
