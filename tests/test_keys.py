from __future__ import annotations

import pytest

from filecrypt._crypto.keys import KeyMaterial, KeyRole
from filecrypt.exceptions import InvalidEncoding, InvalidKeyLength


def test_key_material_repr_hides_bytes() -> None:
    key = KeyMaterial(b"\xaa" * 16, KeyRole.SYMMETRIC)
    assert "aa" not in repr(key)
    assert "length=16" in repr(key)


def test_key_material_wipes_on_context_exit() -> None:
    key = KeyMaterial(b"\x01\x02\x03", KeyRole.MAC)
    with key as inner:
        assert inner.to_bytes() == b"\x01\x02\x03"
    assert key.is_wiped
    assert key.to_bytes() == b"\x00\x00\x00"


def test_key_material_from_hex() -> None:
    key = KeyMaterial.from_hex("00ff", KeyRole.MAC)
    assert key.to_bytes() == b"\x00\xff"
    assert key.hex == "00ff"


def test_key_material_from_hex_tolerates_prefix_and_whitespace() -> None:
    key = KeyMaterial.from_hex("  0xDEADbeef\n", KeyRole.MAC)
    assert key.to_bytes() == b"\xde\xad\xbe\xef"


def test_key_material_from_hex_errors_name_the_key() -> None:
    with pytest.raises(InvalidEncoding, match="symmetric key"):
        KeyMaterial.from_hex("xyz1", KeyRole.SYMMETRIC)
    with pytest.raises(InvalidKeyLength, match="HMAC key must be 32 bytes"):
        KeyMaterial.from_hex("00", KeyRole.MAC, expected_nbytes=32)


def test_key_material_equality_uses_role_and_bytes() -> None:
    assert KeyMaterial(b"ab", KeyRole.MAC) == KeyMaterial(b"ab", KeyRole.MAC)
    assert KeyMaterial(b"ab", KeyRole.MAC) != KeyMaterial(b"ab", KeyRole.SYMMETRIC)
    assert KeyMaterial(b"ab", KeyRole.MAC) != KeyMaterial(b"ac", KeyRole.MAC)
