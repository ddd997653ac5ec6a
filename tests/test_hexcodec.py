from __future__ import annotations

import pytest

from filecrypt._crypto.hexcodec import decode_hex, encode_hex
from filecrypt.exceptions import InvalidEncoding, InvalidKeyLength, KeyFormatError


def test_encode_hex_is_lowercase_without_separators() -> None:
    assert encode_hex(b"\x00\xab\xff\x10") == "00abff10"
    assert encode_hex(b"") == ""


def test_decode_hex_round_trips_all_byte_values() -> None:
    data = bytes(range(256))
    assert decode_hex(encode_hex(data)) == data


def test_decode_hex_accepts_mixed_case() -> None:
    assert decode_hex("DEADbeef") == b"\xde\xad\xbe\xef"


@pytest.mark.parametrize("text", ["0x", "0xab", " ab", "ab\n"])
def test_decode_hex_rejects_prefix_and_whitespace(text: str) -> None:
    with pytest.raises(InvalidEncoding):
        decode_hex(text)


def test_decode_hex_rejects_odd_length() -> None:
    with pytest.raises(InvalidEncoding, match="even"):
        decode_hex("abc")


@pytest.mark.parametrize("text", ["zz", "de  ad", "12-345", "0g"])
def test_decode_hex_rejects_non_hex_characters(text: str) -> None:
    with pytest.raises(InvalidEncoding, match="hex-encoded"):
        decode_hex(text)


def test_decode_hex_enforces_expected_length() -> None:
    with pytest.raises(InvalidKeyLength, match="must be 4 bytes") as excinfo:
        decode_hex("0011", name="key", expected_nbytes=4)
    assert excinfo.value.expected == 4
    assert excinfo.value.actual == 2
    # Both failure kinds are key format errors for callers.
    assert isinstance(excinfo.value, KeyFormatError)
