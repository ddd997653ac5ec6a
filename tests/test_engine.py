from __future__ import annotations

import os

import pytest

from filecrypt._crypto.keys import KeyMaterial, KeyRole
from filecrypt.config import CryptoParameters
from filecrypt.engine import CryptoEngine
from filecrypt.exceptions import EnvelopeTooShort, InvalidKeyLength
from filecrypt.models.results import TextEncoding
from filecrypt.policy import MacKeySource


def test_generate_keys_uses_configured_sizes() -> None:
    engine = CryptoEngine(CryptoParameters(symmetric_key_bytes=24, mac_key_bytes=48))
    symmetric, mac = engine.generate_keys()
    assert (len(symmetric), symmetric.role) == (24, KeyRole.SYMMETRIC)
    assert (len(mac), mac.role) == (48, KeyRole.MAC)


def test_end_to_end_encrypt_decrypt() -> None:
    engine = CryptoEngine()
    key = engine.generate_symmetric_key()
    payload = os.urandom(1000)

    envelope = engine.encrypt(payload, key)
    assert len(envelope) == 1024
    assert engine.decrypt(envelope.to_bytes(), key) == payload


def test_decrypt_short_envelope() -> None:
    engine = CryptoEngine()
    with pytest.raises(EnvelopeTooShort):
        engine.decrypt(b"short", engine.generate_symmetric_key())


def test_parse_symmetric_key_enforces_configured_length() -> None:
    engine = CryptoEngine()
    assert len(engine.parse_symmetric_key("11" * 32)) == 32
    with pytest.raises(InvalidKeyLength):
        engine.parse_symmetric_key("11" * 16)


def test_compute_mac_reports_key_source() -> None:
    engine = CryptoEngine()
    explicit = KeyMaterial(b"m" * 5, KeyRole.MAC)
    symmetric = engine.generate_symmetric_key()

    _, used, source = engine.compute_mac(b"data", explicit, fallback_key=symmetric)
    assert used is explicit and source is MacKeySource.EXPLICIT

    _, used, source = engine.compute_mac(b"data", None, fallback_key=symmetric)
    assert used is symmetric and source is MacKeySource.SYMMETRIC

    result, used, source = engine.compute_mac(b"data")
    assert source is MacKeySource.GENERATED
    assert len(used) == engine.params.mac_key_bytes
    # The generated key reproduces the tag.
    again, _, _ = engine.compute_mac(b"data", used)
    assert again == result


def test_digest_and_classify() -> None:
    engine = CryptoEngine()
    assert engine.digest(b"").hex.startswith("e3b0c442")
    assert engine.classify(b"plain text").encoding is TextEncoding.UTF8
