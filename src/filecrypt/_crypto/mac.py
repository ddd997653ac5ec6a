"""HMAC-SHA256 tags and constant-time comparison."""

from __future__ import annotations

import hashlib
import hmac

from filecrypt.exceptions import InvalidKeyLength
from filecrypt.models.results import MacResult


def hmac_sha256(data: bytes, key: bytes | bytearray | memoryview) -> MacResult:
    """Compute HMAC-SHA256 of *data*.

    Any non-empty key is accepted; keys of the configured MAC length, the
    symmetric key, or keys of other lengths all work.

    Raises
    ------
    InvalidKeyLength
        If *key* is empty.
    """
    if len(key) == 0:
        raise InvalidKeyLength("HMAC key must not be empty", actual=0)
    tag = hmac.new(bytes(key), data, hashlib.sha256).digest()
    return MacResult(tag=tag, algorithm="HMAC-SHA256")


def constant_time_equal(a: bytes | bytearray | memoryview, b: bytes | bytearray | memoryview) -> bool:
    """Compare two byte sequences without an early exit on the first difference.

    Length is compared first; then the XOR of every byte pair is OR-ed
    into an accumulator so the loop always runs to the end.
    """
    if len(a) != len(b):
        return False
    diff = 0
    for x, y in zip(bytes(a), bytes(b), strict=True):
        diff |= x ^ y
    return diff == 0
