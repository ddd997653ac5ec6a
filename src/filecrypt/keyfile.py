"""Key pair text file format.

One key per line::

    symmetric_key_hex:<hex>
    hmac_key_hex:<hex>
"""

from __future__ import annotations

from pathlib import PurePath

from pydantic import BaseModel, ConfigDict, Field

from filecrypt._constants import HMAC_KEY_PREFIX, KEYPAIR_SUFFIX, SYMMETRIC_KEY_PREFIX
from filecrypt._crypto.hexcodec import decode_hex
from filecrypt.exceptions import KeyFormatError


class KeyPairHex(BaseModel):
    """Hex forms of a symmetric key and an HMAC key; either may be empty."""

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    symmetric_key_hex: str = Field(default="", repr=False)
    hmac_key_hex: str = Field(default="", repr=False)


def format_keypair(keys: KeyPairHex) -> str:
    return f"{SYMMETRIC_KEY_PREFIX}{keys.symmetric_key_hex}\n{HMAC_KEY_PREFIX}{keys.hmac_key_hex}\n"


def parse_keypair(text: str) -> KeyPairHex:
    """Parse a key pair file.

    Unknown lines are ignored.  Values must be valid hex.

    Raises
    ------
    KeyFormatError
        If a value is not hex or the file holds neither key.
    """
    values: dict[str, str] = {}
    for line in text.splitlines():
        line = line.strip()
        for prefix, field in ((SYMMETRIC_KEY_PREFIX, "symmetric_key_hex"), (HMAC_KEY_PREFIX, "hmac_key_hex")):
            if line.startswith(prefix):
                value = line[len(prefix) :].strip()
                decode_hex(value, name=field)
                values[field] = value
    if not values:
        raise KeyFormatError("key pair file contains no keys")
    return KeyPairHex(**values)


def suggested_keypair_name(input_name: str | None) -> str:
    """``<input stem>.keypair.hex``, or ``keypair.keypair.hex`` without an input."""
    stem = PurePath(input_name).stem if input_name else ""
    return f"{stem or 'keypair'}{KEYPAIR_SUFFIX}"
