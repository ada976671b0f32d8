"""Signer app collaborator protocols.

Defines the interfaces a wallet implements around the protocol core:
- ChainContextProvider: Supplies the reference block for new transactions.
- TransactionSigner: Holds keys, signs and broadcasts transactions.
"""

from typing import Protocol

from .types import BlockReference, Transaction, TransactionConfirmation


class ChainContextProvider(Protocol):
    """Protocol for fetching chain head information.

    Usually backed by a ``condenser_api.get_dynamic_global_properties``
    call on a Steem node.
    """

    def get_block_reference(self) -> BlockReference:
        """Get the current reference block.

        Returns:
            BlockReference with ref_block_num, ref_block_prefix and the
            head block time.
        """
        ...


class TransactionSigner(Protocol):
    """Protocol for signer-side key operations.

    The signer is responsible for:
    - Listing the accounts it holds keys for
    - Signing resolved transactions
    - Broadcasting signed transactions
    """

    @property
    def accounts(self) -> list[str]:
        """Get the accounts available for signing."""
        ...

    def sign_transaction(self, tx: Transaction, account: str) -> str:
        """Sign a transaction with an account's key.

        Args:
            tx: Resolved transaction.
            account: Signing account, always one of ``accounts``.

        Returns:
            Hex encoded signature.
        """
        ...

    def broadcast_transaction(self, tx: Transaction, signature: str) -> TransactionConfirmation:
        """Broadcast a signed transaction and wait for inclusion.

        Args:
            tx: Resolved transaction.
            signature: Hex encoded signature from sign_transaction.

        Returns:
            TransactionConfirmation with id, block and txn set.
        """
        ...
