"""Callback URL templating."""

import re

from .constants import CALLBACK_PATTERN
from .types import TransactionConfirmation

_CALLBACK_RE = re.compile(CALLBACK_PATTERN)


def resolve_callback(url: str, confirmation: TransactionConfirmation) -> str:
    """Resolve template vars in a callback url.

    ``{{sig}}``, ``{{id}}``, ``{{block}}`` and ``{{txn}}`` are replaced with
    the matching confirmation field, or an empty string when that field is
    missing (e.g. nothing was broadcast). Other ``{{...}}`` tokens are kept.

    Args:
        url: The callback url.
        confirmation: Values to use when resolving.

    Returns:
        The resolved url.
    """

    def replace(match: re.Match[str]) -> str:
        value = getattr(confirmation, match.group(1))
        return "" if value is None else str(value)

    return _CALLBACK_RE.sub(replace, url)
