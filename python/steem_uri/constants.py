"""Steem URI constants - protocol names, placeholder tokens, query keys."""

import os

# URI scheme and the only supported action (URI authority)
PROTOCOL = "steem"
ACTION_SIGN = "sign"

# Signing kinds carrying a Base64u JSON payload
KIND_TX = "tx"
KIND_OP = "op"
KIND_OPS = "ops"
PAYLOAD_KINDS = (KIND_TX, KIND_OP, KIND_OPS)

# ============================================================================
# Placeholder Tokens
# ============================================================================

PLACEHOLDER_REF_BLOCK_NUM = "__ref_block_num"
PLACEHOLDER_REF_BLOCK_PREFIX = "__ref_block_prefix"
PLACEHOLDER_EXPIRATION = "__expiration"
PLACEHOLDER_SIGNER = "__signer"

PLACEHOLDERS = (
    PLACEHOLDER_REF_BLOCK_NUM,
    PLACEHOLDER_REF_BLOCK_PREFIX,
    PLACEHOLDER_EXPIRATION,
    PLACEHOLDER_SIGNER,
)

# ============================================================================
# Query Parameters
# ============================================================================

# Short keys keep the URI small enough for QR codes
PARAM_NO_BROADCAST = "nb"
PARAM_SIGNER = "s"
PARAM_CALLBACK = "cb"

# ============================================================================
# Callback Template Tokens
# ============================================================================

CALLBACK_SIG = "sig"
CALLBACK_ID = "id"
CALLBACK_BLOCK = "block"
CALLBACK_TXN = "txn"

CALLBACK_FIELDS = (CALLBACK_SIG, CALLBACK_ID, CALLBACK_BLOCK, CALLBACK_TXN)
CALLBACK_PATTERN = r"\{\{(sig|id|block|txn)\}\}"

# ============================================================================
# Base64u
# ============================================================================

# Standard Base64 character -> URL-safe replacement
B64U_ENCODE_TABLE = str.maketrans({"+": "-", "/": "_", "=": "."})
B64U_DECODE_TABLE = str.maketrans({"-": "+", "_": "/", ".": "="})

# Valid Base64u text: data characters then at most two padding dots
B64U_REGEX = r"[A-Za-z0-9_-]*\.{0,2}"

# ============================================================================
# Transactions
# ============================================================================

# ref_block_num is the low 16 bits of the reference block number,
# ref_block_prefix the first 4 bytes of its id read as uint32
MAX_REF_BLOCK_NUM = 0xFFFF
MAX_REF_BLOCK_PREFIX = 0xFFFFFFFF

# Steem expiration format (UTC, no timezone suffix)
EXPIRATION_FORMAT = "%Y-%m-%dT%H:%M:%S"

# Seconds added to the head block time when filling __expiration.
# Set STEEM_URI_EXPIRATION_SECONDS to override.
DEFAULT_EXPIRATION_SECONDS = int(os.environ.get("STEEM_URI_EXPIRATION_SECONDS", "60"))
