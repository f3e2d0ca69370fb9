"""
Codec - Bit-packing between chain account counters and a signing nonce.

Pure functions only: no I/O, no state, safe to call from any thread.
"""

from .nonce import (
    ACCOUNT_BITS,
    MAX_ACCOUNT_NUMBER,
    MAX_SAFE_INTEGER,
    MAX_SEQUENCE,
    SEQUENCE_BITS,
    MalformedNonceInputError,
    NonceError,
    NonceParts,
    NonceRangeError,
    account_to_nonce,
    decode,
    decode_account_number,
    decode_sequence,
    encode,
)
