from __future__ import annotations

import hashlib
import re

_DECIMAL_RE = re.compile(r"[0-9]+")


def sha256_hex(data: bytes) -> str:
    return hashlib.sha256(data).hexdigest()


def is_decimal_string(value: str) -> bool:
    # str.isdigit() also accepts superscripts and non-ASCII digits.
    return _DECIMAL_RE.fullmatch(value) is not None


def format_decimal(value: int) -> str:
    if value < 0:
        raise ValueError(f"Expected a non-negative integer: {value}")
    return str(value)
