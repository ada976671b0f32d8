"""steem:// wallet example - handle a signing URI from the command line.

Uses in-memory collaborators instead of a node and a key store, so the
"signature" is only a digest of the transaction. Chain head values come
from the environment.

Usage: python main.py 'steem://sign/op/...'
"""

import hashlib
import json
import logging
import os
import sys
from datetime import datetime, timezone

from dotenv import load_dotenv

from steem_uri import (
    BlockReference,
    SigningRequestHandler,
    SteemUriError,
    Transaction,
    TransactionConfirmation,
    decode,
)

# Load environment variables
load_dotenv()


class JsonFormatter(logging.Formatter):
    def format(self, record):
        payload = {
            "ts": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False)


def configure_logging() -> None:
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(JsonFormatter())
    root = logging.getLogger()
    log_level = os.getenv("STEEM_URI_LOG_LEVEL", "INFO").upper()
    root.setLevel(getattr(logging, log_level, logging.INFO))
    root.handlers = [handler]


class EnvChain:
    """ChainContextProvider reading the head block from the environment."""

    def get_block_reference(self) -> BlockReference:
        head_time = os.getenv("HEAD_BLOCK_TIME")
        return BlockReference(
            ref_block_num=int(os.getenv("REF_BLOCK_NUM", "0")),
            ref_block_prefix=int(os.getenv("REF_BLOCK_PREFIX", "0")),
            head_block_time=(
                datetime.fromisoformat(head_time)
                if head_time
                else datetime.now(timezone.utc).replace(tzinfo=None)
            ),
        )


class DigestSigner:
    """TransactionSigner that "signs" with a SHA-256 digest."""

    def __init__(self, accounts: list[str]):
        self._accounts = accounts

    @property
    def accounts(self) -> list[str]:
        return self._accounts

    def sign_transaction(self, tx: Transaction, account: str) -> str:
        data = json.dumps([account, tx.to_dict()], separators=(",", ":")).encode("utf-8")
        return hashlib.sha256(data).hexdigest()

    def broadcast_transaction(self, tx: Transaction, signature: str) -> TransactionConfirmation:
        tx_id = hashlib.sha256(signature.encode("ascii")).hexdigest()[:40]
        return TransactionConfirmation(sig=signature, id=tx_id, block=0, txn=0)


def main() -> None:
    configure_logging()

    if len(sys.argv) != 2:
        print("Usage: python main.py 'steem://sign/...'")
        sys.exit(1)

    accounts = [a for a in os.getenv("WALLET_ACCOUNTS", "").split(",") if a]
    if not accounts:
        print("Error: WALLET_ACCOUNTS is required (comma separated account names)")
        sys.exit(1)

    handler = SigningRequestHandler(
        DigestSigner(accounts),
        EnvChain(),
        preferred_signer=os.getenv("PREFERRED_SIGNER"),
    )

    try:
        request = decode(sys.argv[1])
        print(f"Request: {json.dumps(request.tx.to_dict(), indent=2)}")
        result = handler.handle_decoded(request)
    except SteemUriError as e:
        print(f"Error: {e}")
        sys.exit(1)

    print(f"Signer: {result.signer}")
    print(f"Transaction: {json.dumps(result.tx.to_dict(), indent=2)}")
    print(f"Confirmation: {result.confirmation.to_dict()}")
    if result.redirect_url:
        print(f"Redirect: {result.redirect_url}")


if __name__ == "__main__":
    main()
