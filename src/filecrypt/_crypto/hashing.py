"""Digest functions."""

from __future__ import annotations

import hashlib

from filecrypt.models.results import DigestResult


def sha256_digest(data: bytes) -> DigestResult:
    """Compute SHA-256 of *data*.

    Deterministic: identical input always yields the identical 32 bytes.
    """
    return DigestResult(digest=hashlib.sha256(data).digest(), algorithm="SHA-256")
