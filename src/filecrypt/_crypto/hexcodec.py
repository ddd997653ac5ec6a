"""Hex encoding for keys, digests and MAC tags."""

from __future__ import annotations

import re

from filecrypt.exceptions import InvalidEncoding, InvalidKeyLength

_HEX_RE = re.compile(r"[0-9a-fA-F]*")


def encode_hex(data: bytes | bytearray | memoryview) -> str:
    """Return lowercase hex, two digits per byte, no separators."""
    return bytes(data).hex()


def decode_hex(
    value: str,
    *,
    name: str = "value",
    expected_nbytes: int | None = None,
) -> bytes:
    """Decode hex text into bytes.

    Strict: every character must be a hex digit, so whitespace and a
    ``0x`` prefix are rejected.

    Parameters
    ----------
    value : str
        Hex text.
    name : str
        Label used in error messages.
    expected_nbytes : int, optional
        Required decoded length.

    Returns
    -------
    bytes
        Decoded bytes.

    Raises
    ------
    InvalidEncoding
        If the text has odd length or contains non-hex characters.
    InvalidKeyLength
        If *expected_nbytes* is given and the decoded length differs.
    """
    if len(value) % 2 != 0:
        raise InvalidEncoding(f"{name} hex length must be even (got {len(value)})")
    if not _HEX_RE.fullmatch(value):
        raise InvalidEncoding(f"{name} must be hex-encoded")
    data = bytes.fromhex(value)

    if expected_nbytes is not None and len(data) != expected_nbytes:
        raise InvalidKeyLength(
            f"{name} must be {expected_nbytes} bytes (got {len(data)})",
            expected=expected_nbytes,
            actual=len(data),
        )
    return data
