"""Cryptographic primitives for filecrypt."""

from __future__ import annotations

from filecrypt._crypto.aes import aes_cbc_decrypt, aes_cbc_encrypt
from filecrypt._crypto.hashing import sha256_digest
from filecrypt._crypto.hexcodec import decode_hex, encode_hex
from filecrypt._crypto.keys import KeyMaterial, KeyRole
from filecrypt._crypto.mac import constant_time_equal, hmac_sha256
from filecrypt._crypto.rng import generate_key, random_bytes
from filecrypt._crypto.sniff import classify, looks_utf16le

__all__ = [
    "KeyMaterial",
    "KeyRole",
    "aes_cbc_decrypt",
    "aes_cbc_encrypt",
    "classify",
    "constant_time_equal",
    "decode_hex",
    "encode_hex",
    "generate_key",
    "hmac_sha256",
    "looks_utf16le",
    "random_bytes",
    "sha256_digest",
]
