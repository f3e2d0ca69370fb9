"""
Nonce Codec - Pack (account_number, sequence) into one signing nonce.

The chain tracks two uint64 counters per signer, but the transaction
envelope carries a single numeric nonce that must survive a round trip
through a double. We reserve 23 bits for the account number (~8 million
accounts) and 20 bits for the sequence (~1 million tx per account):

    nonce = account_number << 20 | sequence

which never exceeds 43 bits, well inside the 53-bit exact integer range.
"""

from __future__ import annotations

from typing import Any, Mapping, NamedTuple

from ..utils import format_decimal, is_decimal_string

ACCOUNT_BITS = 23
SEQUENCE_BITS = 20

MAX_ACCOUNT_NUMBER = 1 << ACCOUNT_BITS
MAX_SEQUENCE = 1 << SEQUENCE_BITS
SEQUENCE_MASK = MAX_SEQUENCE - 1

# Largest integer a double represents exactly (2^53 - 1).
MAX_SAFE_INTEGER = (1 << 53) - 1


class NonceError(ValueError):
    exit_code: int = 1


class NonceRangeError(NonceError):
    exit_code = 2


class MalformedNonceInputError(NonceError):
    exit_code = 3


class NonceParts(NamedTuple):
    account_number: str
    sequence: str


def _parse_field(value: Any, field: str, limit: int, bits: int) -> int:
    if not isinstance(value, str):
        raise MalformedNonceInputError(
            f"{field} must be a decimal string, got {type(value).__name__}"
        )
    if not is_decimal_string(value):
        raise MalformedNonceInputError(
            f"{field} is not a non-negative base-10 integer: {value!r}"
        )
    # Compare digit counts first; int() refuses strings past 4300 digits.
    digits = value.lstrip("0") or "0"
    if len(digits) > len(str(limit)) or int(digits, 10) >= limit:
        raise NonceRangeError(
            f"{field} {_abbreviate(digits)} does not fit in {bits} bits, "
            "must update Nonce handler"
        )
    return int(digits, 10)


def _abbreviate(digits: str) -> str:
    if len(digits) <= 24:
        return digits
    return f"{digits[:10]}...{digits[-10:]} ({len(digits)} digits)"


def _check_nonce(nonce: Any) -> int:
    # bool is an int subclass; True is not a nonce.
    if isinstance(nonce, bool) or not isinstance(nonce, int):
        raise MalformedNonceInputError(
            f"Nonce must be an integer, got {type(nonce).__name__}"
        )
    if nonce < 0:
        raise NonceRangeError(f"Invalid Nonce, must not be negative: {nonce}")
    return nonce


def encode(account_number: str, sequence: str) -> int:
    """
    Encode account number and sequence into a single nonce.

    Args:
        account_number: Decimal string, as returned by account queries
        sequence: Decimal string, as returned by account queries

    Returns:
        The packed nonce

    Raises:
        MalformedNonceInputError: If either field is not a decimal string
        NonceRangeError: If either field does not fit its bit budget
    """
    acct = _parse_field(account_number, "account_number", MAX_ACCOUNT_NUMBER, ACCOUNT_BITS)
    seq = _parse_field(sequence, "sequence", MAX_SEQUENCE, SEQUENCE_BITS)

    nonce = (acct << SEQUENCE_BITS) | seq
    if nonce > MAX_SAFE_INTEGER:
        raise NonceRangeError(f"Nonce {nonce} is not exactly representable as a double")
    return nonce


def decode_account_number(nonce: int) -> str:
    """Extract the account number from a nonce for signing."""
    acct = _check_nonce(nonce) >> SEQUENCE_BITS
    if acct >= MAX_ACCOUNT_NUMBER:
        raise NonceRangeError(
            "Invalid Nonce, account number is higher than can safely be "
            f"encoded in Nonce: {acct}"
        )
    return format_decimal(acct)


def decode_sequence(nonce: int) -> str:
    """Extract the sequence from a nonce for signing."""
    return format_decimal(_check_nonce(nonce) & SEQUENCE_MASK)


def decode(nonce: int) -> NonceParts:
    """Split a nonce back into its (account_number, sequence) pair."""
    return NonceParts(
        account_number=decode_account_number(nonce),
        sequence=decode_sequence(nonce),
    )


def account_to_nonce(info: Any) -> int:
    """
    Encode an account record into a nonce.

    Accepts an ``AccountInfo`` or any mapping with ``account_number`` and
    ``sequence`` keys, so the two fields can't be swapped at the call site.
    """
    if isinstance(info, Mapping):
        try:
            return encode(info["account_number"], info["sequence"])
        except KeyError as exc:
            raise MalformedNonceInputError(f"Account record is missing {exc.args[0]!r}") from exc
    account_number = getattr(info, "account_number", None)
    sequence = getattr(info, "sequence", None)
    if account_number is None or sequence is None:
        raise MalformedNonceInputError(
            f"Expected an account record, got {type(info).__name__}"
        )
    return encode(account_number, sequence)


__all__ = [
    "ACCOUNT_BITS",
    "SEQUENCE_BITS",
    "MAX_ACCOUNT_NUMBER",
    "MAX_SEQUENCE",
    "MAX_SAFE_INTEGER",
    "NonceError",
    "NonceRangeError",
    "MalformedNonceInputError",
    "NonceParts",
    "encode",
    "decode",
    "decode_account_number",
    "decode_sequence",
    "account_to_nonce",
]
