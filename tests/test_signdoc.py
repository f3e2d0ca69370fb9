"""Tests for recovering sign doc headers from a packed nonce."""

from __future__ import annotations

import hashlib

import pytest

from cosmnonce.codec.nonce import MalformedNonceInputError, NonceRangeError, encode
from cosmnonce.signdoc.fields import (
    build_sign_doc,
    canonical_sign_bytes,
    nonce_from_sign_doc,
    sign_doc_digest,
    sign_doc_fields,
)

CHAIN_ID = "simd-testing"

FEE = {
    "amount": [{"amount": "25000", "denom": "ucosm"}],
    "gas": "1500000",
}

DELEGATE_MSG = {
    "type": "cosmos-sdk/MsgDelegate",
    "value": {
        "delegator_address": "cosmos1pkptre7fdkl6gfrzlesjjvhxhlc3r4gmmk8rs6",
        "validator_address": "cosmosvaloper1rwh0cxa72d3yle3r4l8gd7vyphrmjy2kpe4x72",
        "amount": {"amount": "25000", "denom": "ustake"},
    },
}


class TestSignDocFields:
    """Tests for sign_doc_fields."""

    def test_header(self) -> None:
        assert sign_doc_fields(5242922, CHAIN_ID) == {
            "chain_id": CHAIN_ID,
            "account_number": "5",
            "sequence": "42",
        }

    def test_zero_nonce(self) -> None:
        fields = sign_doc_fields(0, CHAIN_ID)
        assert fields["account_number"] == "0"
        assert fields["sequence"] == "0"

    @pytest.mark.parametrize("chain_id", ["", None, 7])
    def test_bad_chain_id(self, chain_id: object) -> None:
        with pytest.raises(MalformedNonceInputError, match="chain_id"):
            sign_doc_fields(5242922, chain_id)  # type: ignore[arg-type]

    def test_out_of_range_nonce(self) -> None:
        with pytest.raises(NonceRangeError):
            sign_doc_fields(2**43, CHAIN_ID)


class TestBuildSignDoc:
    """Tests for build_sign_doc and canonical bytes."""

    def test_layout(self) -> None:
        doc = build_sign_doc(5242922, CHAIN_ID, [DELEGATE_MSG], FEE, memo="Test delegation")
        assert doc["account_number"] == "5"
        assert doc["sequence"] == "42"
        assert doc["chain_id"] == CHAIN_ID
        assert doc["memo"] == "Test delegation"
        assert doc["msgs"] == [DELEGATE_MSG]
        assert doc["fee"] == FEE

    def test_inputs_are_copied(self) -> None:
        fee = {"amount": [{"amount": "1", "denom": "ucosm"}], "gas": "200000"}
        doc = build_sign_doc(1, CHAIN_ID, [], fee)
        fee["amount"][0]["amount"] = "999"
        assert doc["fee"]["amount"][0]["amount"] == "1"

    def test_canonical_bytes_sorted_and_compact(self) -> None:
        assert canonical_sign_bytes(sign_doc_fields(5242922, CHAIN_ID)) == (
            b'{"account_number":"5","chain_id":"simd-testing","sequence":"42"}'
        )

    def test_canonical_bytes_ignore_key_order(self) -> None:
        doc = build_sign_doc(5242922, CHAIN_ID, [DELEGATE_MSG], FEE)
        reordered = dict(reversed(list(doc.items())))
        assert canonical_sign_bytes(doc) == canonical_sign_bytes(reordered)

    def test_digest(self) -> None:
        doc = build_sign_doc(5242922, CHAIN_ID, [DELEGATE_MSG], FEE)
        expected = hashlib.sha256(canonical_sign_bytes(doc)).hexdigest()
        assert sign_doc_digest(doc) == expected

    def test_digest_changes_with_sequence(self) -> None:
        first = build_sign_doc(encode("5", "42"), CHAIN_ID, [DELEGATE_MSG], FEE)
        second = build_sign_doc(encode("5", "43"), CHAIN_ID, [DELEGATE_MSG], FEE)
        assert sign_doc_digest(first) != sign_doc_digest(second)


class TestNonceFromSignDoc:
    """Re-deriving the nonce from a document header."""

    def test_roundtrip(self) -> None:
        nonce = encode("123456", "789")
        doc = build_sign_doc(nonce, CHAIN_ID, [DELEGATE_MSG], FEE)
        assert nonce_from_sign_doc(doc) == nonce

    def test_missing_field(self) -> None:
        with pytest.raises(MalformedNonceInputError, match="sequence"):
            nonce_from_sign_doc({"chain_id": CHAIN_ID, "account_number": "5"})

    def test_out_of_range_header(self) -> None:
        with pytest.raises(NonceRangeError):
            nonce_from_sign_doc({"account_number": "8388608", "sequence": "0"})
