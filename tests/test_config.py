from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest
from pydantic import ValidationError

from filecrypt.config import (
    CipherMode,
    CryptoParameters,
    DigestAlgorithm,
    load_parameters,
    parameters_from_mapping,
    resolve_config_path,
)


def _write(tmp_path: Path, content: str) -> Path:
    path = tmp_path / "config.json"
    path.write_text(content, encoding="utf-8")
    return path


def test_defaults() -> None:
    params = CryptoParameters()
    assert params.symmetric_key_bytes == 32
    assert params.iv_bytes == 16
    assert params.mac_key_bytes == 32
    assert params.cipher_mode is CipherMode.CBC
    assert params.digest_algorithm is DigestAlgorithm.SHA256


def test_parameters_are_immutable() -> None:
    params = CryptoParameters()
    with pytest.raises(ValidationError):
        params.iv_bytes = 8  # type: ignore[misc]


def test_load_parameters_reads_json_keys(tmp_path: Path) -> None:
    path = _write(
        tmp_path,
        json.dumps(
            {
                "aes_mode": "CBC",
                "aes_key_bytes": 16,
                "aes_iv_bytes": 16,
                "hmac_key_bytes": 64,
                "hash_algorithm": "SHA-256",
            }
        ),
    )
    params = load_parameters(path)
    assert params.symmetric_key_bytes == 16
    assert params.mac_key_bytes == 64


def test_missing_keys_take_defaults(tmp_path: Path) -> None:
    params = load_parameters(_write(tmp_path, '{"hmac_key_bytes": 48}'))
    assert params.mac_key_bytes == 48
    assert params.symmetric_key_bytes == 32


def test_missing_file_falls_back_to_defaults(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING, logger="filecrypt.config"):
        params = load_parameters(tmp_path / "absent.json")
    assert params == CryptoParameters()
    assert "using defaults" in caplog.text


@pytest.mark.parametrize("content", ["not json", "[1, 2, 3]", '"text"'])
def test_malformed_file_falls_back_to_defaults(tmp_path: Path, content: str) -> None:
    assert load_parameters(_write(tmp_path, content)) == CryptoParameters()


@pytest.mark.parametrize("raw", [b"\xff\xfe", b'{"aes_key_bytes": 16, "x": "\xff\xfe"}'])
def test_undecodable_file_falls_back_to_defaults(tmp_path: Path, raw: bytes) -> None:
    path = tmp_path / "config.json"
    path.write_bytes(raw)
    assert load_parameters(path) == CryptoParameters()


def test_invalid_field_is_defaulted_individually() -> None:
    params = parameters_from_mapping({"aes_key_bytes": -5, "hmac_key_bytes": 20})
    assert params.symmetric_key_bytes == 32
    assert params.mac_key_bytes == 20


def test_unsupported_mode_and_algorithm_are_defaulted() -> None:
    params = parameters_from_mapping({"aes_mode": "GCM", "hash_algorithm": "MD5", "hmac_key_bytes": 16})
    assert params.cipher_mode is CipherMode.CBC
    assert params.digest_algorithm is DigestAlgorithm.SHA256
    assert params.mac_key_bytes == 16


def test_inconsistent_sizes_fall_back_to_defaults() -> None:
    # 20 is positive but not an AES key size.
    assert parameters_from_mapping({"aes_key_bytes": 20, "hmac_key_bytes": 8}) == CryptoParameters()


def test_cipher_sizes_are_validated() -> None:
    with pytest.raises(ValidationError, match="aes_key_bytes must be one of 16, 24, 32"):
        CryptoParameters(symmetric_key_bytes=20)
    with pytest.raises(ValidationError, match="aes_iv_bytes must be 16"):
        CryptoParameters(iv_bytes=12)


def test_resolve_config_path_precedence(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("FILECRYPT_CONFIG", raising=False)
    assert resolve_config_path() == Path("config.json")

    monkeypatch.setenv("FILECRYPT_CONFIG", str(tmp_path / "env.json"))
    assert resolve_config_path() == tmp_path / "env.json"
    assert resolve_config_path(tmp_path / "explicit.json") == tmp_path / "explicit.json"
