"""Cryptographically secure random bytes and key generation."""

from __future__ import annotations

import secrets

from filecrypt._crypto.keys import KeyMaterial, KeyRole
from filecrypt.exceptions import RngFailure


def random_bytes(length: int) -> bytes:
    """Read *length* bytes from the OS CSPRNG.

    Raises
    ------
    ValueError
        If *length* is negative.
    RngFailure
        If the entropy source cannot be read.
    """
    if length < 0:
        raise ValueError(f"length must be non-negative, got {length}")
    try:
        return secrets.token_bytes(length)
    except (OSError, NotImplementedError) as exc:
        raise RngFailure(f"entropy source unavailable: {exc}") from exc


def generate_key(length: int, role: KeyRole) -> KeyMaterial:
    """Generate a fresh random key of *length* bytes.

    Raises :class:`ValueError` unless *length* is positive.
    """
    if length <= 0:
        raise ValueError(f"key length must be positive, got {length}")
    return KeyMaterial(random_bytes(length), role)
