__all__ = [
    # Codec
    "ACCOUNT_BITS",
    "SEQUENCE_BITS",
    "MAX_ACCOUNT_NUMBER",
    "MAX_SEQUENCE",
    "MAX_SAFE_INTEGER",
    "NonceParts",
    "encode",
    "decode",
    "decode_account_number",
    "decode_sequence",
    "account_to_nonce",
    # Codec errors
    "NonceError",
    "NonceRangeError",
    "MalformedNonceInputError",
    # Models
    "AccountInfo",
    # Sign doc
    "sign_doc_fields",
    "build_sign_doc",
    "canonical_sign_bytes",
    "sign_doc_digest",
    "nonce_from_sign_doc",
    # Schema
    "SchemaValidationError",
    "SchemaRegistry",
]

from .codec.nonce import (
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
from .signdoc.fields import (
    build_sign_doc,
    canonical_sign_bytes,
    nonce_from_sign_doc,
    sign_doc_digest,
    sign_doc_fields,
)
from .spec.models import AccountInfo
from .spec.schemas import SchemaRegistry, SchemaValidationError
