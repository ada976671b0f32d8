"""Signing aliases - short URIs for common operations.

An alias replaces the Base64u payload with literal path segments, e.g.
``steem://sign/transfer/alice/1.000%20STEEM/thanks``. Each alias is an
operation template whose ``__<param>`` tokens are filled from the
positional segments. ``__signer`` is left for placeholder resolution.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Any

from .constants import PLACEHOLDER_SIGNER
from .errors import InvalidPayload, InvalidSigningAction
from .resolver import substitute
from .types import Operation

ALIAS_TRANSFER = "transfer"
ALIAS_VOTE = "vote"

# Full upvote in basis points
DEFAULT_VOTE_WEIGHT = 10000
MAX_VOTE_WEIGHT = 10000


def _vote_weight(value: str) -> int:
    weight = int(value)
    if not -MAX_VOTE_WEIGHT <= weight <= MAX_VOTE_WEIGHT:
        raise ValueError(f"weight must be between -{MAX_VOTE_WEIGHT} and {MAX_VOTE_WEIGHT}")
    return weight


@dataclass(frozen=True)
class AliasParam:
    """A positional alias parameter.

    Attributes:
        name: Parameter name, referenced as ``__<name>`` in the template.
        required: Whether the segment must be present.
        default: Value used when an optional segment is missing.
        convert: Converts the segment text to the template value.
    """

    name: str
    required: bool = True
    default: Any = None
    convert: Callable[[str], Any] = str

    @property
    def token(self) -> str:
        return f"__{self.name}"


@dataclass(frozen=True)
class SigningAlias:
    """An alias name bound to an operation template."""

    name: str
    params: tuple[AliasParam, ...]
    template: Operation

    @property
    def min_args(self) -> int:
        return sum(1 for p in self.params if p.required)

    @property
    def max_args(self) -> int:
        return len(self.params)

    def check_arity(self, count: int) -> None:
        """Validate the number of positional arguments.

        Raises:
            InvalidPayload: If count is outside the accepted range.
        """
        if not self.min_args <= count <= self.max_args:
            expected = (
                str(self.max_args)
                if self.min_args == self.max_args
                else f"{self.min_args}-{self.max_args}"
            )
            raise InvalidPayload(
                f"'{self.name}' takes {expected} parameter(s), got {count}"
            )

    def expand(self, args: Sequence[str]) -> Operation:
        """Build the operation for the given positional arguments.

        Args:
            args: Decoded path segments following the alias name.

        Returns:
            Operation with the alias parameters filled in.

        Raises:
            InvalidPayload: On a wrong argument count or a value that can
                not be converted.
        """
        self.check_arity(len(args))

        context: dict[str, Any] = {}
        for i, param in enumerate(self.params):
            if i >= len(args):
                context[param.token] = param.default
                continue
            try:
                context[param.token] = param.convert(args[i])
            except ValueError as e:
                raise InvalidPayload(f"bad '{param.name}' for '{self.name}': {e}", cause=e) from e

        return substitute(self.template, context)


ALIASES: dict[str, SigningAlias] = {
    ALIAS_TRANSFER: SigningAlias(
        name=ALIAS_TRANSFER,
        params=(
            AliasParam("to"),
            AliasParam("amount"),
            AliasParam("memo", required=False, default=""),
        ),
        template=[
            "transfer",
            {
                "from": PLACEHOLDER_SIGNER,
                "to": "__to",
                "amount": "__amount",
                "memo": "__memo",
            },
        ],
    ),
    ALIAS_VOTE: SigningAlias(
        name=ALIAS_VOTE,
        params=(
            AliasParam("author"),
            AliasParam("permlink"),
            AliasParam(
                "weight", required=False, default=DEFAULT_VOTE_WEIGHT, convert=_vote_weight
            ),
        ),
        template=[
            "vote",
            {
                "voter": PLACEHOLDER_SIGNER,
                "author": "__author",
                "permlink": "__permlink",
                "weight": "__weight",
            },
        ],
    ),
}


def get_alias(name: str) -> SigningAlias:
    """Look up an alias by name.

    Raises:
        InvalidSigningAction: If no alias has that name.
    """
    alias = ALIASES.get(name)
    if alias is None:
        raise InvalidSigningAction(name)
    return alias


def is_alias(name: str) -> bool:
    return name in ALIASES
