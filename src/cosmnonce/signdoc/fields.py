"""
Sign-doc Fields - Recover signing headers from a packed nonce.

The signer receives a transaction whose only replay-protection field is
the packed nonce; the chain, however, verifies signatures over a document
that carries ``account_number`` and ``sequence`` separately. These helpers
rebuild that header and the canonical bytes handed to the signer.

Nothing here holds a key or produces a signature.
"""

from __future__ import annotations

import copy
import logging
from typing import Any, Mapping, Sequence

import rfc8785

from ..codec.nonce import MalformedNonceInputError, decode, encode
from ..utils import sha256_hex

logger = logging.getLogger(__name__)


def sign_doc_fields(nonce: int, chain_id: str) -> dict[str, str]:
    """
    Build the signing header for a nonce.

    Args:
        nonce: Packed nonce from the transaction envelope
        chain_id: Chain the signature is bound to

    Returns:
        Dict with chain_id, account_number and sequence (all strings)
    """
    if not isinstance(chain_id, str) or not chain_id:
        raise MalformedNonceInputError("chain_id must be a non-empty string")

    parts = decode(nonce)
    return {
        "chain_id": chain_id,
        "account_number": parts.account_number,
        "sequence": parts.sequence,
    }


def build_sign_doc(
    nonce: int,
    chain_id: str,
    msgs: Sequence[Mapping[str, Any]],
    fee: Mapping[str, Any],
    memo: str = "",
) -> dict[str, Any]:
    """
    Build a legacy JSON sign document for a nonce.

    ``msgs`` and ``fee`` are copied verbatim; encoding them is the
    caller's business.
    """
    doc: dict[str, Any] = sign_doc_fields(nonce, chain_id)
    doc["fee"] = copy.deepcopy(dict(fee))
    doc["memo"] = memo
    doc["msgs"] = [copy.deepcopy(dict(msg)) for msg in msgs]
    logger.debug(
        "Built sign doc for account %s sequence %s on %s (%d msgs)",
        doc["account_number"],
        doc["sequence"],
        chain_id,
        len(doc["msgs"]),
    )
    return doc


def canonical_sign_bytes(sign_doc: Mapping[str, Any]) -> bytes:
    """Canonicalize a sign document using RFC 8785 JCS."""
    return rfc8785.dumps(dict(sign_doc))


def sign_doc_digest(sign_doc: Mapping[str, Any]) -> str:
    """SHA-256 hex digest of the canonical sign bytes."""
    return sha256_hex(canonical_sign_bytes(sign_doc))


def nonce_from_sign_doc(sign_doc: Mapping[str, Any]) -> int:
    """Re-derive the packed nonce from a sign document's header."""
    try:
        account_number = sign_doc["account_number"]
        sequence = sign_doc["sequence"]
    except KeyError as exc:
        raise MalformedNonceInputError(f"Sign doc is missing {exc.args[0]!r}") from exc
    return encode(account_number, sequence)
