"""Signing request handling for signer apps.

Ties the protocol core to a wallet's own key storage and node access:
decode the URI, fill in placeholders from the chain head, sign,
optionally broadcast and build the callback redirect.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from datetime import timedelta

from .callback import resolve_callback
from .constants import DEFAULT_EXPIRATION_SECONDS, EXPIRATION_FORMAT
from .decoder import decode
from .resolver import resolve_transaction
from .signer import ChainContextProvider, TransactionSigner
from .types import (
    BlockReference,
    DecodeResult,
    ResolveOptions,
    SigningResult,
    TransactionConfirmation,
)

logger = logging.getLogger(__name__)


class SigningRequestHandler:
    """Handles steem:// signing requests on behalf of a signer app.

    Attributes:
        preferred_signer: Account used when a request names no signer.
        expiration_seconds: Lifetime of resolved transactions.
    """

    def __init__(
        self,
        signer: TransactionSigner,
        chain: ChainContextProvider,
        preferred_signer: str | None = None,
        expiration_seconds: int = DEFAULT_EXPIRATION_SECONDS,
    ):
        """Create SigningRequestHandler.

        Args:
            signer: Key holder used to sign and broadcast.
            chain: Source of the reference block.
            preferred_signer: Default account. Falls back to the first of
                ``signer.accounts``.
            expiration_seconds: Seconds added to the head block time.
        """
        if expiration_seconds <= 0:
            raise ValueError("expiration_seconds must be positive")
        self._signer = signer
        self._chain = chain
        self.preferred_signer = preferred_signer
        self.expiration_seconds = expiration_seconds

    def resolve_options(self, ref: BlockReference) -> ResolveOptions:
        """Build resolution options from a reference block.

        Args:
            ref: Current chain head information.

        Returns:
            ResolveOptions with the expiration set relative to the head block.
        """
        accounts = list(self._signer.accounts)
        preferred = self.preferred_signer or (accounts[0] if accounts else None)
        expiration = ref.head_block_time + timedelta(seconds=self.expiration_seconds)
        return ResolveOptions(
            ref_block_num=ref.ref_block_num,
            ref_block_prefix=ref.ref_block_prefix,
            expiration=expiration.strftime(EXPIRATION_FORMAT),
            signers=accounts,
            preferred_signer=preferred,
        )

    def handle(self, uri: str) -> SigningResult:
        """Decode, resolve, sign and (unless no_broadcast) broadcast a request.

        Args:
            uri: steem:// signing URI.

        Returns:
            SigningResult with the signed transaction, confirmation and the
            resolved callback URL if the request carried one.

        Raises:
            SteemUriError: If the URI is invalid or the signer is unavailable.
        """
        return self.handle_decoded(decode(uri))

    def handle_decoded(self, request: DecodeResult) -> SigningResult:
        """Like handle, for a request that was already decoded."""
        options = self.resolve_options(self._chain.get_block_reference())
        resolved = resolve_transaction(request.tx, request.params, options)

        signature = self._signer.sign_transaction(resolved.tx, resolved.signer)
        if request.params.no_broadcast:
            confirmation = TransactionConfirmation(sig=signature)
        else:
            confirmation = replace(
                self._signer.broadcast_transaction(resolved.tx, signature), sig=signature
            )

        redirect_url = None
        if request.params.callback:
            redirect_url = resolve_callback(request.params.callback, confirmation)
            logger.debug("Redirecting %s to %s", resolved.signer, redirect_url)

        return SigningResult(
            tx=resolved.tx,
            signer=resolved.signer,
            confirmation=confirmation,
            redirect_url=redirect_url,
        )
