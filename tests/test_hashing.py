from __future__ import annotations

import pytest
from pydantic import ValidationError

from filecrypt._crypto.hashing import sha256_digest
from filecrypt.models.results import DigestResult, MacResult

EMPTY_SHA256 = "e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855"


def test_sha256_of_empty_input_matches_known_constant() -> None:
    result = sha256_digest(b"")
    assert result.hex == EMPTY_SHA256
    assert len(result.digest) == 32
    assert result.algorithm == "SHA-256"


def test_sha256_known_vector() -> None:
    assert sha256_digest(b"abc").hex == "ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad"


def test_sha256_is_deterministic_and_input_sensitive() -> None:
    assert sha256_digest(b"payload") == sha256_digest(b"payload")
    assert sha256_digest(b"payload").digest != sha256_digest(b"payloae").digest


@pytest.mark.parametrize("model, field", [(DigestResult, "digest"), (MacResult, "tag")])
def test_results_reject_values_that_are_not_32_bytes(model: type, field: str) -> None:
    with pytest.raises(ValidationError):
        model(**{field: b"\x00" * 31})
    with pytest.raises(ValidationError):
        model(**{field: b"\x00" * 33})
